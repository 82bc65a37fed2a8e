"""Tests for the news feed."""

import pytest

from genoshare.models import User
from genoshare.services import NewsConfig, get_news


class TestGetNews:
    """Tests for get_news."""

    def test_sections_newest_first(self, populated_store):
        feed = get_news(populated_store)

        assert [u.name for u in feed.users] == ["bob", "alice"]
        assert [p.characteristic for p in feed.phenotypes] == ["Hair color", "Eye color"]
        assert len(feed.genotypes) == 1
        assert feed.phenotype_comments[0].subject == "Mine change"
        assert feed.snp_comments[0].snp_name == "rs12913832"

    def test_default_limit_is_twenty(self, store):
        for i in range(25):
            store.add(User(name=f"user{i}"))
        assert len(get_news(store).users) == 20

    def test_per_section_limits(self, populated_store):
        feed = get_news(populated_store, NewsConfig(max_users=1, max_phenotypes=0))

        assert [u.name for u in feed.users] == ["bob"]
        assert feed.phenotypes == []
        assert len(feed.genotypes) == 1

    def test_uniform(self):
        config = NewsConfig.uniform(3)
        assert config.max_snp_comments == 3
        assert config.max_genotypes == 3

    def test_empty_store(self, store):
        assert get_news(store).is_empty()

    def test_negative_limit(self, store):
        with pytest.raises(ValueError):
            get_news(store, NewsConfig(max_users=-1))
