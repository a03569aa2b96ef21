from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from polar_core.locality.report import BILL_DISPLAY_LIMIT, NO_TITLE, render_report
from polar_core.models import LocalPoliticalReport

console = Console()


def display_report(report: LocalPoliticalReport, out: Optional[Console] = None) -> None:
    """
    Display a local political report in the console.

    Uses Rich to show:
    - A summary panel built from render_report()'s header lines
    - A table of matched representatives (name, party, chamber, state-district)
    - A table of the first local bills

    Empty sections are shown as a dim note, never as an error.

    Args:
        report: Compiled report
        out: Console to print to (module console by default)
    """
    out = out or console
    lines = render_report(report)

    # Header lines precede the first "---" section marker
    header = []
    for line in lines:
        if line.startswith("---"):
            break
        header.append(line)

    district_resolved = report.location.state is not None and report.location.district is not None
    border = "green" if district_resolved else "yellow"
    out.print(Panel("\n".join(header), title="[bold]Local Political Data[/bold]", border_style=border))

    reps = report.representatives.from_congress
    if reps:
        table = Table(title="Representatives", show_lines=False)
        table.add_column("Name", style="white")
        table.add_column("Party", style="cyan", width=14)
        table.add_column("Chamber", style="magenta")
        table.add_column("District", justify="center", width=9)
        for rep in reps:
            district = "-" if rep.district is None else str(rep.district)
            table.add_row(rep.display_name, rep.display_party, rep.chamber, f"{rep.state or '?'}-{district}")
        out.print(table)
    else:
        out.print("[dim]No representatives matched.[/dim]")

    bills = report.legislation.local_bills
    if bills:
        table = Table(title=f"Local Bills (first {min(len(bills), BILL_DISPLAY_LIMIT)} of {len(bills)})")
        table.add_column("Number", style="cyan", width=12)
        table.add_column("Title", style="white", max_width=70)
        table.add_column("Latest Action", style="dim", max_width=40)
        for bill in bills[:BILL_DISPLAY_LIMIT]:
            table.add_row(bill.number, bill.title or NO_TITLE, bill.latest_action or "")
        out.print(table)
    else:
        out.print("[dim]No local bills found.[/dim]")

    votes = report.legislation.recent_votes
    if votes:
        out.print(f"[cyan]Recent roll call votes:[/cyan] {len(votes)}")


def display_key_status(status: dict[str, bool], out: Optional[Console] = None) -> None:
    out = out or console
    table = Table(title="API Key Status")
    table.add_column("Source", style="cyan")
    table.add_column("Status", justify="center")
    for source, configured in status.items():
        table.add_row(source, "[green]✓ Configured[/green]" if configured else "[red]✗ Missing[/red]")
    out.print(table)
