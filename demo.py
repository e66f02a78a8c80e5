from pprint import pprint

from tiny import DiagramExporter, Parser, Scanner, token_table
from tests.test_util import open_file

# Load a program string,
program = open_file("data/valid/factorial.tny")
# or define a program manually
program = r"""
read x; {input an integer}
if 0 < x then { don't compute if x <= 0 }
fact := 1;
repeat
fact := fact * x;
x := x - 1
until x = 0;
write fact { output factorial of x }
end
"""

# Perform scanning on the input program
scanner = Scanner(program)
tokens = scanner.scan()

print("=" * 25)
print("Tokens:")
print("=" * 25)
for kind, literal in token_table(tokens):
    print(f"{kind:<15}{literal}")

# Perform parsing on the scanned tokens
parser = Parser(program)
tree = parser.parse(tokens)

# Print out the tree as TINY code
print("=" * 25)
print("Program:")
print("=" * 25)
print(tree)

# Print out the structure handed to tree diagram renderers
print("=" * 25)
print("Diagram:")
print("=" * 25)
pprint(DiagramExporter().export(tree), sort_dicts=False)
