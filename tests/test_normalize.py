"""Tests for raw record normalization."""

from datetime import date, datetime, timezone

from asiajobs.collector.normalize import infer_school, normalize, normalize_batch, parse_date
from asiajobs.models import RawJob


class TestParseDate:
    def test_iso_date(self, utc):
        assert parse_date("2024-01-01") == utc(2024, 1, 1)

    def test_rfc2822(self, utc):
        assert parse_date("Mon, 03 Jun 2024 09:00:00 GMT") == utc(2024, 6, 3, 9)

    def test_offset_converted_to_utc(self, utc):
        assert parse_date("2024-06-01T08:00:00+08:00") == utc(2024, 6, 1, 0)

    def test_datetime_passthrough(self, utc):
        value = utc(2024, 2, 2, 12)
        assert parse_date(value) == value

    def test_naive_datetime_assumed_utc(self, utc):
        assert parse_date(datetime(2024, 2, 2)) == utc(2024, 2, 2)

    def test_date(self, utc):
        assert parse_date(date(2024, 2, 2)) == utc(2024, 2, 2)

    def test_epoch_seconds(self, utc):
        assert parse_date(0) == utc(1970, 1, 1)

    def test_unparseable(self):
        assert parse_date("not a date") is None
        assert parse_date("") is None
        assert parse_date("   ") is None
        assert parse_date(None) is None
        assert parse_date(True) is None


class TestInferSchool:
    def test_uppercase_prefix(self):
        assert infer_school("ABC INTERNATIONAL SCHOOL: Head of Science") == (
            "ABC INTERNATIONAL SCHOOL",
            "Head of Science",
        )

    def test_existing_school_not_overwritten(self):
        assert infer_school("ABC SCHOOL: Teacher", "Other School") == ("Other School", "ABC SCHOOL: Teacher")

    def test_mixed_case_prefix_ignored(self):
        assert infer_school("Maths Teacher: Year 5", "") == ("", "Maths Teacher: Year 5")

    def test_short_prefix_ignored(self):
        assert infer_school("ABC: Teacher") == ("", "ABC: Teacher")

    def test_only_first_colon_splits(self):
        assert infer_school("UWCSEA: Teacher: Maths") == ("UWCSEA", "Teacher: Maths")

    def test_empty_remainder_keeps_title(self):
        assert infer_school("NORD ANGLIA:") == ("NORD ANGLIA", "NORD ANGLIA:")

    def test_no_colon(self):
        assert infer_school("Teacher") == ("", "Teacher")


class TestNormalize:
    def test_school_inference(self):
        job = normalize({"title": "ABC INTERNATIONAL SCHOOL: Head of Science", "original_url": "https://x.com/9"})
        assert job.school == "ABC INTERNATIONAL SCHOOL"
        assert job.title == "Head of Science"

    def test_rejects_no_title_no_url(self):
        assert normalize({"description": "A very interesting job somewhere."}) is None

    def test_rejects_without_identity(self):
        assert normalize({"title": "Teacher"}) is None

    def test_id_fallback_key(self):
        job = normalize({"title": "Teacher", "id": 42})
        assert job.identity_key == "42"
        assert job.original_url == ""

    def test_url_only_record_kept(self):
        job = normalize({"apply_url": "https://x.com/apply/1"})
        assert job.identity_key == "https://x.com/apply/1"
        assert job.title == ""

    def test_urls_mirror_each_other(self):
        job = normalize({"title": "Teacher", "apply_url": " https://x.com/a "})
        assert job.original_url == "https://x.com/a"
        assert job.apply_url == "https://x.com/a"
        assert job.identity_key == "https://x.com/a"

    def test_original_url_preferred_for_key(self):
        job = normalize({"title": "T", "original_url": "https://x.com/o", "apply_url": "https://x.com/a", "id": "7"})
        assert job.identity_key == "https://x.com/o"
        assert job.apply_url == "https://x.com/a"

    def test_feed_item(self, raw_feed_item, utc):
        job = normalize(raw_feed_item)
        assert job.school == "XJTLU"
        assert job.title == "Lecturer in Marketing"
        assert job.category == "University Faculty"
        assert job.country == "China"
        assert job.posting_date == utc(2024, 6, 3, 9)
        assert job.application_deadline is None
        assert "<" not in job.description
        assert "&nbsp;" not in job.description
        assert job.source == "RSS"

    def test_explicit_category_kept(self):
        job = normalize({"title": "Dean", "category": " Research ", "original_url": "u"})
        assert job.category == "Research"

    def test_explicit_country_normalized(self):
        job = normalize({"title": "Teacher", "country": "PRC", "original_url": "u"})
        assert job.country == "China"

    def test_country_from_inferred_school(self):
        job = normalize({"title": "DULWICH COLLEGE SINGAPORE: Teacher", "original_url": "u"})
        assert job.country == "Singapore"

    def test_bad_date_becomes_none(self):
        job = normalize({"title": "T", "original_url": "u", "posting_date": "whenever"})
        assert job.posting_date is None

    def test_description_sanitized(self):
        job = normalize({"title": "T", "original_url": "u", "description": "<p>---</p>"})
        assert job.description == ""

    def test_accepts_raw_model(self):
        job = normalize(RawJob(title="Teacher", original_url="u"))
        assert job.identity_key == "u"

    def test_extra_fields_ignored(self):
        job = normalize({"title": "Teacher", "original_url": "u", "salary": "lots"})
        assert job is not None

    def test_nested_location_kept(self):
        job = normalize({"title": "Teacher", "original_url": "https://x.com/1", "location": {"city": "Dubai"}})
        assert job is not None
        assert job.location == ""

    def test_list_description_kept(self):
        job = normalize({"title": "Teacher", "original_url": "https://x.com/1", "description": ["a", "b"]})
        assert job is not None
        assert job.description == ""

    def test_list_title_with_url_kept(self):
        job = normalize({"title": ["not", "a", "string"], "original_url": "u"})
        assert job.title == ""
        assert job.identity_key == "u"


class TestNormalizeBatch:
    def test_drops_rejections(self):
        records = [
            {"title": "Teacher", "original_url": "https://x.com/1"},
            {"description": "nothing useful here at all"},
            "not a record",
            {"title": "Dean", "original_url": "https://x.com/2"},
        ]
        jobs = normalize_batch(records)
        assert [j.title for j in jobs] == ["Teacher", "Dean"]

    def test_empty(self):
        assert normalize_batch([]) == []

    def test_timezone_aware_dates(self, local_batch):
        (job,) = normalize_batch(local_batch)
        assert job.posting_date.tzinfo is not None
        assert job.posting_date == datetime(2024, 1, 1, tzinfo=timezone.utc)
