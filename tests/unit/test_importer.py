"""Tests for importing raw genotype files."""

import pytest

from genoshare.models import Genotype, Snp, User, UserSnp
from genoshare.normalization import GenotypeParseError
from genoshare.services import import_genotype
from genoshare.store import RecordNotFoundError


@pytest.fixture
def genotyping(store):
    user = store.add(User(name="alice"))
    return store.add(Genotype(user_id=user.id, filetype="23andme"))


class TestImportGenotype:
    """Tests for import_genotype."""

    def test_creates_snps_and_user_snps(self, store, genotyping, sample_23andme_lines):
        report = import_genotype(store, genotyping.id, sample_23andme_lines)

        assert report.parsed == 3
        assert report.snps_created == 3
        assert report.user_snps_created == 3
        assert report.user_snps_skipped == 0
        assert store.snp_names() == {"rs4477212", "rs3094315", "i3000001"}

        calls = {us.snp_name: us.local_genotype for us in store.all(UserSnp)}
        assert calls["rs3094315"] == "AG"
        assert all(us.user_id == genotyping.user_id for us in store.all(UserSnp))

    def test_new_snp_defaults(self, store, genotyping):
        import_genotype(store, genotyping.id, ["rs1\tmt\t3027\tt"])

        snp = store.all(Snp)[0]
        assert snp.chromosome == "MT"
        assert snp.ranking == 0
        assert snp.user_snps_count == 1
        assert snp.allele_frequency == {"A": 0, "T": 0, "G": 0, "C": 0}

    def test_existing_snp_reused(self, store, genotyping):
        store.add(Snp(name="rs1", chromosome="1", position="5", user_snps_count=4))

        report = import_genotype(store, genotyping.id, ["rs1\t1\t5\tAA"])

        assert report.snps_created == 0
        assert report.user_snps_created == 1
        assert store.all(Snp)[0].user_snps_count == 5

    def test_existing_user_snp_skipped(self, store, genotyping):
        store.add(UserSnp(snp_name="rs1", genotype_id=genotyping.id,
                          user_id=genotyping.user_id, local_genotype="AA"))

        report = import_genotype(store, genotyping.id, ["rs1\t1\t5\tAA", "rs2\t1\t6\tCC"])

        assert report.user_snps_skipped == 1
        assert report.user_snps_created == 1
        assert store.count(UserSnp) == 2

    def test_duplicate_rows_inserted_once(self, store, genotyping):
        report = import_genotype(store, genotyping.id, ["rs1\t1\t5\tAA", "rs1\t1\t5\tAA"])

        assert report.snps_created == 1
        assert report.user_snps_created == 1
        assert report.user_snps_skipped == 1

    def test_filetype_override(self, store, genotyping):
        report = import_genotype(store, genotyping.id, ["rs1,C/T,1,5,+,CT"], filetype="decodeme")
        assert report.filetype == "decodeme"
        assert store.user_snp_names(genotyping.user_id) == {"rs1"}

    def test_unknown_genotype(self, store):
        with pytest.raises(RecordNotFoundError):
            import_genotype(store, 404, [])

    def test_parse_error_propagates(self, store, genotyping):
        with pytest.raises(GenotypeParseError):
            import_genotype(store, genotyping.id, ["rs1\t1\t5\tAA", "garbage"])
