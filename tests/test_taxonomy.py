"""Tests for the curated taxonomy and filter options."""

import pytest
from pydantic import ValidationError

from asiajobs.taxonomy import TAXONOMY, build_filter_options, curated_categories, curated_countries


class TestTaxonomy:
    def test_five_regions(self):
        assert [g.label for g in TAXONOMY.country_groups] == [
            "Northeast Asia",
            "Southeast Asia",
            "South Asia",
            "Central Asia",
            "West Asia / Middle East",
        ]

    def test_labels_unique_across_groups(self):
        countries = curated_countries()
        categories = curated_categories()
        assert len(countries) == len(set(countries)) == 50
        assert len(categories) == len(set(categories))

    def test_order_preserved(self):
        assert curated_countries()[0] == "China"
        assert curated_categories()[0] == "Early Years Teaching"

    def test_immutable(self):
        group = TAXONOMY.country_groups[0]
        with pytest.raises(ValidationError):
            group.label = "Elsewhere"
        assert isinstance(group.items, tuple)


class TestFilterOptions:
    def test_no_jobs(self):
        options = build_filter_options([])
        assert options.country_extras == []
        assert options.category_extras == []
        assert options.country_groups == TAXONOMY.country_groups

    def test_extras_from_data(self, make_job):
        jobs = [
            make_job("1", country="China", category="Finance"),
            make_job("2", country="remote", category="Cleaning"),
            make_job("3", country="Germany", category=""),
            make_job("4", country="Germany", category="Admissions Support"),
        ]
        options = build_filter_options(jobs)
        assert options.country_extras == ["Germany", "remote"]
        assert options.category_extras == ["Admissions Support", "Cleaning"]
