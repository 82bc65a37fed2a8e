"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from genoshare.models import (
    Genotype,
    Phenotype,
    PhenotypeComment,
    SnpComment,
    User,
)
from genoshare.store import RecordStore

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """Timestamp ``minutes`` after a fixed base time."""
    return BASE_TIME + timedelta(minutes=minutes)


@pytest.fixture
def store():
    """Empty record store."""
    return RecordStore()


@pytest.fixture
def populated_store():
    """Store with two users, a genotyping, a phenotype and comments."""
    store = RecordStore()
    alice = store.add(User(name="alice", created_at=at(0)))
    bob = store.add(User(name="bob", created_at=at(1)))
    store.add(Genotype(user_id=alice.id, filetype="23andme", created_at=at(2)))
    eye_color = store.add(Phenotype(characteristic="Eye color", created_at=at(3)))
    store.add(Phenotype(characteristic="Hair color", created_at=at(4)))
    store.add(PhenotypeComment(
        phenotype_id=eye_color.id,
        user_id=bob.id,
        subject="Mine change",
        comment_text="Green in summer, grey in winter",
        created_at=at(5),
    ))
    store.add(SnpComment(
        snp_name="rs12913832",
        user_id=alice.id,
        subject="HERC2",
        comment_text="Blue eyes here",
        created_at=at(6),
    ))
    return store


@pytest.fixture
def phenotype(store):
    """A single phenotype in an otherwise empty store."""
    return store.add(Phenotype(characteristic="Favourite sport"))


@pytest.fixture
def sample_23andme_lines():
    """Excerpt of a 23andMe raw data file."""
    return [
        "# This data file generated by 23andMe at: Thu Jan 01 00:00:00 2015\n",
        "# rsid\tchromosome\tposition\tgenotype\n",
        "rs4477212\t1\t82154\tAA\n",
        "rs3094315\t1\t752566\tAG\n",
        "i3000001\tMT\t3027\tT\n",
    ]
