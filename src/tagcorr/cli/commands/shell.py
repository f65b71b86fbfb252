"""Interactive menu for the tagcorr CLI.

The selected tags live in a local TagSelection passed into every analysis
call; nothing is kept on the service between menu iterations.
"""

from ...analysis.report import format_aggregation, format_benchmark, format_ranking
from ...core.config import Config
from ...core.types import BenchmarkFailure, TagSelection
from ...services import AnalysisService

MAIN_MENU = """
1. Select tag(s)
2. Choose data structure (Heap / Hash Table / Compare)
3. Exit"""

STRUCTURE_MENU = """Choose data structure:
1. Heap
2. Hash Table
3. Compare both"""


def handle_shell(args, config: Config) -> None:
    """Handle shell command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    service = AnalysisService.from_config(config)
    print(f"Loaded {len(service.records)} videos.")
    run_menu(service)
    print("Exiting... Goodbye!")


def run_menu(service: AnalysisService) -> None:
    """Drive the menu loop until the user exits or input ends."""
    selection = TagSelection()

    while True:
        print(MAIN_MENU)
        try:
            choice = input("> ").strip()
            if choice == "1":
                selection = TagSelection.parse(
                    input("Enter tags separated by commas (e.g., music,gaming): ")
                )
                print("Tags selected." if selection else "No tags entered.")
            elif choice == "2":
                print(STRUCTURE_MENU)
                _run_structure(service, selection, input("> ").strip())
            elif choice == "3":
                return
            else:
                print("Invalid input.")
        except EOFError:
            return


def _run_structure(service: AnalysisService, selection: TagSelection, choice: str) -> None:
    if not selection:
        print("Select tags first.")
        return

    if choice == "1":
        lines = format_ranking(service.rank(selection))
    elif choice == "2":
        lines = format_aggregation(service.aggregate(selection))
    elif choice == "3":
        report = service.compare(selection)
        if isinstance(report, BenchmarkFailure):
            lines = [f"Error: {report.error}"]
        else:
            lines = format_benchmark(report)
    else:
        lines = ["Invalid choice."]

    print()
    for line in lines:
        print(line)
