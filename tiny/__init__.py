import sys

from tiny.parser.parser import Parser
from tiny.scanner.scanner import Scanner, token_table
from tiny.token import Token
from tiny.tree.exporter import DiagramExporter
from tiny.type import Type

# Default is 1000, deeply bracketed expressions recurse through exp/term/factor
sys.setrecursionlimit(5000)
