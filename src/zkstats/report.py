"""Stats note composition: identity, template and output filename."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from zkstats.metrics import ReportAggregates

# The persisted layout; existing notes and scripts depend on it byte for byte,
# including the trailing space on the cdate line.
REPORT_TEMPLATE = (
    "---\n"
    "UUID:     ›[[{timestamp}]]\n"
    "cdate:    {date} {time} \n"
    "tags:     #statistics\n"
    "---\n"
    "# {title}\n"
    "\n"
    "Zettelkasten Stats\n"
    "★★★★★★★★★★★★★★★★★★\n"
    "Total Number of Notes in Zettelkasten: {note_count}\n"
    "Total Word Count: {word_count}\n"
    "Average Word Count: {average_word_count}\n"
    "Total Link Count: {link_count}\n"
    "Average Link Count: {average_link_count}\n"
    "Total Notes in Proofing Oven: {proofing_count}\n"
    "\n"
    "Monthly Breakdown:\n"
    "{table}\n"
)


@dataclass(frozen=True)
class GeneratedIdentity:
    timestamp: str  # YYYYMMDDhhmm
    date: str       # DD-MM-YYYY
    time: str       # HH:MM AM|PM
    title: str

    @classmethod
    def from_datetime(cls, now: datetime, title: str) -> GeneratedIdentity:
        """Derive every timestamp string of a run from the single sampled *now*."""
        hours12 = now.hour % 12 or 12
        ampm = "PM" if now.hour >= 12 else "AM"
        return cls(
            timestamp=now.strftime("%Y%m%d%H%M"),
            date=now.strftime("%d-%m-%Y"),
            time=f"{hours12:02d}:{now.minute:02d} {ampm}",
            title=title,
        )


@dataclass
class StatsNote:
    filename: str
    content: str
    path: str | None = None  # relative path in the vault once written


def output_filename(identity: GeneratedIdentity) -> str:
    """Return "<timestamp> <title>". The title is used as-is, unsanitized."""
    return f"{identity.timestamp} {identity.title}"


def compose_report(identity: GeneratedIdentity, aggregates: ReportAggregates, table: str) -> str:
    return REPORT_TEMPLATE.format(
        timestamp=identity.timestamp,
        date=identity.date,
        time=identity.time,
        title=identity.title,
        note_count=aggregates.note_count,
        word_count=aggregates.word_count,
        average_word_count=aggregates.average_word_count,
        link_count=aggregates.link_count,
        average_link_count=aggregates.average_link_count,
        proofing_count=aggregates.proofing_count,
        table=table,
    )
