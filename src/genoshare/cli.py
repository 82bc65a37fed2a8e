"""Command-line interface for GenoShare.

ARCHITECTURE:
    CLI Commands → RecordStore (JSON snapshot) → services → rich output

Commands:
    geno news                  Newest genotypes, users, phenotypes and comments
    geno variations ID         Known variations of a phenotype
    geno dedupe FILE           Deduplicate variations, one per line
    geno parse FILE -f TYPE    Parse a raw genotype file
    geno import FILE -g ID     Import a raw genotype file into the snapshot

Snapshot:
    --data PATH  or  GENOSHARE_DATA=PATH (also read from .env)

Logging:
    --log-level  Set log level (DEBUG, INFO, WARN, ERROR). Default: INFO
    Environment: GENOSHARE_LOG_LEVEL=DEBUG|INFO|WARN|ERROR
"""

import json
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from genoshare.config.constants import NEWS_LIMIT, SUPPORTED_FILETYPES
from genoshare.config.debug import get_logger, set_log_level
from genoshare.normalization import GenotypeParseError, dedupe_variations, parse_genotype_file
from genoshare.services import NewsConfig, PhenotypeService, get_news, import_genotype
from genoshare.store import RecordNotFoundError, RecordStore

load_dotenv()

app = typer.Typer(
    name="geno",
    help="Share and explore genotypes and phenotypes",
    add_completion=False,
)

DATA_OPTION = typer.Option(
    ..., "--data", "-d", envvar="GENOSHARE_DATA", help="JSON snapshot of the record store",
)
LOG_LEVEL_OPTION = typer.Option("INFO", "--log-level", "-l", help="Log level: DEBUG, INFO, WARN, ERROR")


def _fail(message: str) -> None:
    get_logger(__name__).error(message)
    print(f"Error: {message}")
    raise typer.Exit(1)


def _load_store(data: Path) -> RecordStore:
    if not data.exists():
        _fail(f"Snapshot not found: {data}")
    try:
        return RecordStore.load(data)
    except ValueError as e:
        # Covers JSONDecodeError and pydantic ValidationError
        _fail(f"Invalid snapshot {data}: {e}")


def _check_file(path: Path) -> None:
    if not path.exists():
        _fail(f"Input file not found: {path}")


@app.command()
def news(
    data: Path = DATA_OPTION,
    limit: int = typer.Option(NEWS_LIMIT, "--limit", "-n", min=0, help="Records per section"),
    log_level: str = LOG_LEVEL_OPTION,
) -> None:
    """Show the newest records of each kind.

    Examples:
        geno news --data snapshot.json
        geno news -d snapshot.json --limit 5
    """
    set_log_level(log_level)
    store = _load_store(data)
    feed = get_news(store, NewsConfig.uniform(limit))

    console = Console(width=100)
    names = {user.id: user.name for user in store.all("users")}
    characteristics = {p.id: p.characteristic for p in store.all("phenotypes")}

    def section(title: str, columns: list[str], rows: list[list[str]]) -> None:
        table = Table(title=f"{title} ({len(rows)})", title_justify="left")
        for column in columns:
            table.add_column(column)
        for row in rows:
            table.add_row(*[escape(str(cell)) for cell in row])
        console.print(table)

    def when(record) -> str:
        return record.created_at.strftime("%Y-%m-%d %H:%M")

    section("New genotypes", ["Created", "User", "Filetype"], [
        [when(g), names.get(g.user_id, f"#{g.user_id}"), g.filetype] for g in feed.genotypes
    ])
    section("New users", ["Created", "Name"], [
        [when(u), u.name] for u in feed.users
    ])
    section("New phenotypes", ["Created", "Characteristic"], [
        [when(p), p.characteristic] for p in feed.phenotypes
    ])
    section("New phenotype comments", ["Created", "Phenotype", "User", "Subject"], [
        [when(c), characteristics.get(c.phenotype_id, f"#{c.phenotype_id}"),
         names.get(c.user_id, f"#{c.user_id}"), c.subject]
        for c in feed.phenotype_comments
    ])
    section("New SNP comments", ["Created", "SNP", "User", "Subject"], [
        [when(c), c.snp_name, names.get(c.user_id, f"#{c.user_id}"), c.subject]
        for c in feed.snp_comments
    ])


@app.command()
def variations(
    phenotype_id: int = typer.Argument(..., help="Phenotype id"),
    data: Path = DATA_OPTION,
    log_level: str = LOG_LEVEL_OPTION,
) -> None:
    """List the known variations of a phenotype, one per line."""
    set_log_level(log_level)
    store = _load_store(data)

    try:
        with PhenotypeService(store) as service:
            known = service.known_variations(phenotype_id)
    except RecordNotFoundError as e:
        _fail(str(e))

    for variation in known:
        print(variation)


@app.command()
def dedupe(
    input_file: Path = typer.Argument(..., help="Text file with one variation per line"),
    log_level: str = LOG_LEVEL_OPTION,
) -> None:
    """Deduplicate variations case-insensitively, keeping the first spelling.

    Example:
        geno dedupe answers.txt
    """
    set_log_level(log_level)
    _check_file(input_file)

    with open(input_file, "r") as f:
        lines = [line.rstrip("\r\n") for line in f]

    for variation in dedupe_variations(lines):
        print(variation)


@app.command()
def parse(
    input_file: Path = typer.Argument(..., help="Raw genotype file"),
    filetype: str = typer.Option(
        ..., "--filetype", "-f", help=f"One of: {', '.join(SUPPORTED_FILETYPES)}",
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output JSON file"),
    log_level: str = LOG_LEVEL_OPTION,
) -> None:
    """Parse a raw genotype file into SNP calls.

    Examples:
        geno parse genome.txt --filetype 23andme
        geno parse exome.vcf -f 23andme-exome-vcf --output calls.json
    """
    set_log_level(log_level)
    _check_file(input_file)

    try:
        with open(input_file, "r") as f:
            calls = list(parse_genotype_file(f, filetype))
    except GenotypeParseError as e:
        _fail(str(e))

    if output:
        with open(output, "w") as f:
            json.dump([call.model_dump(mode="json") for call in calls], f, indent=2)
        print(f"Saved {len(calls)} calls to {output}")
        return

    for call in calls:
        print(f"{call.name}\t{call.chromosome}\t{call.position}\t{call.allele}")


@app.command("import")
def import_(
    input_file: Path = typer.Argument(..., help="Raw genotype file"),
    genotype_id: int = typer.Option(..., "--genotype-id", "-g", help="Genotyping the file belongs to"),
    data: Path = DATA_OPTION,
    filetype: Optional[str] = typer.Option(None, "--filetype", "-f", help="Override the recorded filetype"),
    log_level: str = LOG_LEVEL_OPTION,
) -> None:
    """Import a raw genotype file and save the updated snapshot.

    Example:
        geno import genome.txt --genotype-id 3 --data snapshot.json
    """
    set_log_level(log_level)
    _check_file(input_file)
    store = _load_store(data)

    try:
        with open(input_file, "r") as f:
            report = import_genotype(store, genotype_id, f, filetype=filetype)
    except (RecordNotFoundError, GenotypeParseError) as e:
        _fail(str(e))

    store.save(data)

    print(f"Imported genotype #{report.genotype_id} ({report.filetype})")
    print(f"  Calls parsed:      {report.parsed}")
    print(f"  New SNPs:          {report.snps_created}")
    print(f"  New user-SNPs:     {report.user_snps_created}")
    print(f"  Existing user-SNPs: {report.user_snps_skipped}")


@app.command()
def version() -> None:
    """Show version information."""
    from genoshare import __version__
    print(f"GenoShare version {__version__}")


if __name__ == "__main__":
    app()
