from __future__ import annotations

from typing import TYPE_CHECKING

from tiny.util import Colors, Span

if TYPE_CHECKING:
    from tiny.error.error import CompilerError


# Class used to create messages, which can be communicated to the programmer
class Communicator:

    # Creates an appropriate message string from the given arguments
    @staticmethod
    def create_message(
        program: str,
        span: Span,
        class_name="CompilerError",
        before: str = "",
        after: str = "",
        n_before: int = 1,
        n_after: int = 1,
        color=Colors.RED,
    ) -> str:
        lines = program.splitlines()
        error_lines = lines[
            max(0, span.start_ln - n_before - 1) : span.end_ln + n_after
        ]
        final_error_lines = []
        start_line_no = max(1, span.start_ln - n_before)
        end_line_no = start_line_no + len(error_lines) - 1
        for i, line in enumerate(error_lines, start=start_line_no):
            # Align the code behind line numbers of different widths:
            #    *9. x := x - 1
            # -> 10. until x = 0;
            padding = " " * (len(str(end_line_no)) - len(str(i)))
            if span.start_ln <= i <= span.end_ln:
                start_col = span.start_col if i == span.start_ln else 0
                end_col = span.end_col if i == span.end_ln else len(line)
                # An empty span still needs a visible marker, e.g. at the end of input
                if start_col == end_col:
                    highlighted = f"{color}^{Colors.ENDC}"
                else:
                    highlighted = f"{color}{line[start_col:end_col]}{Colors.ENDC}"
                final_line = (
                    f"-> {padding}{i}. {line[:start_col]}{highlighted}{line[end_col:]}"
                )
            else:
                final_line = f"   {padding}{i}. {line}"
            final_error_lines.append(final_line)

        message = class_name + ": " + before
        if final_error_lines:
            message += "\n" + "\n".join(final_error_lines)
        if after:
            message += "\n" + after
        return message

    # Communicates an error to the programmer by raising the exception of its stage
    @staticmethod
    def communicate(error: CompilerError) -> None:
        raise error.stage(str(error), error)
