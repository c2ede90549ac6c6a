"""
interaction.py
===============
Handles all user interactions for ScopeCheck.

Responsibilities:
    - Collect a pasted block of targets from the terminal
    - Ask simple yes/no questions
"""


class UserInteraction:
    """
    Prompts the user on the terminal.
    """

    def __init__(self, input_func=None):
        """
        :param input_func: Callable used to read one line (defaults to input)
        """
        self.input_func = input_func or input

    # ----------------------------------------------------------------------
    def _ask_yes_no(self, question: str) -> bool:
        """Simple yes/no prompt."""
        while True:
            response = self.input_func(f"{question} (y/n): ").strip().lower()
            if response in ["y", "yes"]:
                return True
            elif response in ["n", "no"]:
                return False
            else:
                print("[!] Please answer with 'y' or 'n'.")

    # ----------------------------------------------------------------------
    def collect_targets(self) -> str:
        """
        Read targets line by line until EOF (Ctrl-D, or Ctrl-Z on Windows).
        Blank and comment lines are kept so reported line numbers match
        what the user pasted.
        """
        print("[+] Paste targets, one per line. Finish with Ctrl-D.")
        lines = []
        while True:
            try:
                lines.append(self.input_func(""))
            except EOFError:
                break
        return "\n".join(lines)

    # ----------------------------------------------------------------------
    def confirm_split(self, batch_count: int) -> bool:
        """Ask whether to print the batches after splitting."""
        return self._ask_yes_no(f"Targets split into {batch_count} batches. Show them?")
