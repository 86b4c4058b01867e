"""Tabular output of release durations."""

from typing import List, Tuple, TYPE_CHECKING

from rich.table import Table

from .models import Phase, ReleaseRecord

if TYPE_CHECKING:
    from .ledger import ReleaseLedger


def visible_rows(
    ledger: 'ReleaseLedger',
    show_ga: bool,
    show_beta: bool,
    show_rc: bool,
) -> List[Tuple[str, List[ReleaseRecord]]]:
    """(label, records) for every bucket whose phase is selected, e.g. ('1.7rc', [...])."""
    shown = {
        Phase.GENERAL_AVAILABILITY: show_ga,
        Phase.BETA: show_beta,
        Phase.RELEASE_CANDIDATE: show_rc,
    }
    return [
        (f"{version}{phase.label}", records)
        for version, phase, records in ledger.buckets()
        if shown[phase]
    ]


def render_csv(
    ledger: 'ReleaseLedger',
    show_ga: bool = False,
    show_beta: bool = False,
    show_rc: bool = False,
) -> str:
    """Render days each release was current, one row per version and phase.

        ,0,1
        1.7beta,14,21,
        1.7rc,10,28,

    The header numbers the columns: column 0 is beta1/rc1/.0, and so on.
    """
    header = [""]
    lines = []
    for label, records in visible_rows(ledger, show_ga, show_beta, show_rc):
        cells = [label]
        for i, record in enumerate(records):
            if i > len(header) - 2:
                header.append(str(i))
            cells.append(str(record.days))
        lines.append(",".join(cells) + ",\n")
    return ",".join(header) + "\n" + "".join(lines)


def render_table(
    ledger: 'ReleaseLedger',
    show_ga: bool = False,
    show_beta: bool = False,
    show_rc: bool = False,
    title: str = "Days current per release",
) -> Table:
    """Same rows as render_csv, as a rich Table for the terminal."""
    rows = visible_rows(ledger, show_ga, show_beta, show_rc)
    columns = max((len(records) for _, records in rows), default=0)

    table = Table(title=title, header_style="bold cyan")
    table.add_column("Release", style="bold")
    for i in range(columns):
        table.add_column(str(i), justify="right")

    for label, records in rows:
        cells = [str(record.days) for record in records]
        cells += [""] * (columns - len(cells))
        table.add_row(label, *cells)
    return table
