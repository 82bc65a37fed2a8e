"""Integration tests for CLI commands."""

import json

import pytest
from typer.testing import CliRunner

from genoshare.cli import app
from genoshare.models import UserPhenotype
from genoshare.store import RecordStore

runner = CliRunner()


@pytest.fixture
def snapshot(tmp_path, populated_store):
    """Populated store saved to disk, with two spellings of one eye color."""
    populated_store.add(UserPhenotype(phenotype_id=1, user_id=1, variation="Brown"))
    populated_store.add(UserPhenotype(phenotype_id=1, user_id=2, variation="brown"))
    populated_store.add(UserPhenotype(phenotype_id=1, user_id=2, variation="Blue"))
    path = tmp_path / "snapshot.json"
    populated_store.save(path)
    return path


@pytest.mark.integration
class TestNewsCommand:
    """Tests for 'geno news'."""

    def test_lists_sections(self, snapshot):
        result = runner.invoke(app, ["news", "--data", str(snapshot)])

        assert result.exit_code == 0
        assert "New genotypes (1)" in result.stdout
        assert "New users (2)" in result.stdout
        assert "bob" in result.stdout
        assert "Eye color" in result.stdout
        assert "rs12913832" in result.stdout

    def test_limit(self, snapshot):
        result = runner.invoke(app, ["news", "--data", str(snapshot), "--limit", "1"])

        assert result.exit_code == 0
        assert "New users (1)" in result.stdout

    def test_corrupt_snapshot(self, tmp_path):
        path = tmp_path / "snapshot.json"
        path.write_text("{not json")

        result = runner.invoke(app, ["news", "--data", str(path)])

        assert result.exit_code == 1
        assert "Invalid snapshot" in result.stdout

    def test_snapshot_with_invalid_record(self, tmp_path):
        path = tmp_path / "snapshot.json"
        path.write_text(json.dumps({"users": [{"created_at": "2024-01-01T12:00:00Z"}]}))

        result = runner.invoke(app, ["news", "--data", str(path)])

        assert result.exit_code == 1
        assert "Invalid snapshot" in result.stdout

    def test_missing_snapshot(self, tmp_path):
        result = runner.invoke(app, ["news", "--data", str(tmp_path / "nope.json")])

        assert result.exit_code == 1
        assert "Snapshot not found" in result.stdout


@pytest.mark.integration
class TestVariationsCommand:
    """Tests for 'geno variations'."""

    def test_known_variations(self, snapshot):
        result = runner.invoke(app, ["variations", "1", "--data", str(snapshot)])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["Brown", "Blue"]

    def test_unknown_phenotype(self, snapshot):
        result = runner.invoke(app, ["variations", "99", "--data", str(snapshot)])

        assert result.exit_code == 1
        assert "No phenotypes with id 99" in result.stdout


@pytest.mark.integration
class TestDedupeCommand:
    """Tests for 'geno dedupe'."""

    def test_dedupe_file(self, tmp_path):
        path = tmp_path / "answers.txt"
        path.write_text("Ping pong\nping pong\nChess\n")

        result = runner.invoke(app, ["dedupe", str(path)])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["Ping pong", "Chess"]

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["dedupe", str(tmp_path / "nope.txt")])
        assert result.exit_code == 1


@pytest.mark.integration
class TestParseCommand:
    """Tests for 'geno parse'."""

    def test_prints_calls(self, tmp_path, sample_23andme_lines):
        path = tmp_path / "genome.txt"
        path.write_text("".join(sample_23andme_lines))

        result = runner.invoke(app, ["parse", str(path), "--filetype", "23andme"])

        assert result.exit_code == 0
        assert result.stdout.splitlines()[0] == "rs4477212\t1\t82154\tAA"

    def test_json_output(self, tmp_path, sample_23andme_lines):
        path = tmp_path / "genome.txt"
        path.write_text("".join(sample_23andme_lines))
        output = tmp_path / "calls.json"

        result = runner.invoke(app, ["parse", str(path), "-f", "23andme", "-o", str(output)])

        assert result.exit_code == 0
        calls = json.loads(output.read_text())
        assert len(calls) == 3
        assert calls[1]["allele"] == "AG"

    def test_unknown_filetype(self, tmp_path):
        path = tmp_path / "genome.txt"
        path.write_text("rs1\t1\t1\tAA\n")

        result = runner.invoke(app, ["parse", str(path), "-f", "myheritage"])

        assert result.exit_code == 1
        assert "Unknown filetype" in result.stdout


@pytest.mark.integration
class TestImportCommand:
    """Tests for 'geno import'."""

    def test_import_updates_snapshot(self, tmp_path, snapshot, sample_23andme_lines):
        genome = tmp_path / "genome.txt"
        genome.write_text("".join(sample_23andme_lines))

        result = runner.invoke(app, ["import", str(genome), "-g", "1", "--data", str(snapshot)])

        assert result.exit_code == 0
        assert "New user-SNPs:     3" in result.stdout

        store = RecordStore.load(snapshot)
        assert store.snp_names() == {"rs4477212", "rs3094315", "i3000001"}
        assert store.count("user_snps") == 3

    def test_unknown_genotype(self, tmp_path, snapshot):
        genome = tmp_path / "genome.txt"
        genome.write_text("rs1\t1\t1\tAA\n")

        result = runner.invoke(app, ["import", str(genome), "-g", "9", "--data", str(snapshot)])

        assert result.exit_code == 1
        assert "No genotypes with id 9" in result.stdout


class TestVersionCommand:
    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "GenoShare version 0.1.0" in result.stdout
