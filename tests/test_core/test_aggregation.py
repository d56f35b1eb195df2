"""Tests for per-category aggregation."""

from __future__ import annotations

import pytest

from fte_summary.core.aggregation import aggregate_category, bed_percentage
from fte_summary.models.staff import Category, CategoryBucket, StaffRecord


class TestAggregateCategory:
    def test_full_and_part_time_scenario(self, nursing_bucket):
        stats = aggregate_category(nursing_bucket, standard_hours=160, bed_count=10)
        assert stats.count == 3
        assert stats.full_time_count == 2
        assert stats.part_time_count == 1
        assert stats.total_working_hours == 400
        assert stats.total_equivalent == pytest.approx(2.5)
        assert stats.bed_percentage == pytest.approx(25.0)

    def test_no_bed_count_means_absent_percentage(self, nursing_bucket):
        stats = aggregate_category(nursing_bucket, standard_hours=160, bed_count=None)
        assert stats.total_equivalent == pytest.approx(2.5)
        assert stats.bed_percentage is None

    def test_zero_bed_count_means_absent_percentage(self, nursing_bucket):
        stats = aggregate_category(nursing_bucket, standard_hours=160, bed_count=0)
        assert stats.bed_percentage is None

    @pytest.mark.parametrize("standard_hours", [0, -160])
    def test_non_positive_standard_hours(self, nursing_bucket, standard_hours):
        stats = aggregate_category(nursing_bucket, standard_hours=standard_hours, bed_count=10)
        assert stats.total_equivalent == 0
        assert stats.bed_percentage is None
        assert stats.total_working_hours == 400

    def test_empty_bucket_is_all_zero(self):
        stats = aggregate_category(CategoryBucket(category=Category.CARE), 160, bed_count=10)
        assert stats.count == 0
        assert stats.full_time_count == 0
        assert stats.part_time_count == 0
        assert stats.night_shift_count == 0
        assert stats.total_working_hours == 0
        assert stats.total_equivalent == 0
        assert stats.bed_percentage is None

    def test_paid_service_sub_counts(self, paid_service_bucket):
        stats = aggregate_category(paid_service_bucket, 160)
        assert stats.count == 5
        assert stats.full_time_count == 1
        assert stats.part_time_count == 1
        assert stats.night_shift_count == 1
        assert stats.culinary_count == 1
        assert stats.cleaning_count == 1
        assert stats.full_time_count + stats.part_time_count <= stats.count

    def test_sub_counts_zero_outside_paid_service(self):
        bucket = CategoryBucket(
            category=Category.CARE,
            staffs=[StaffRecord(name="x", employment_type="宿直", working_hours=40)],
        )
        stats = aggregate_category(bucket, 160)
        assert stats.night_shift_count == 0
        assert stats.count == 1

    def test_employment_type_match_is_exact(self):
        bucket = CategoryBucket(
            category=Category.NURSING,
            staffs=[
                StaffRecord(name="a", employment_type="正社員(短時間)", working_hours=120),
                StaffRecord(name="b", employment_type="パートタイム", working_hours=60),
            ],
        )
        stats = aggregate_category(bucket, 160)
        assert stats.full_time_count == 0
        assert stats.part_time_count == 0
        assert stats.count == 2

    def test_absent_hours_count_as_zero(self):
        bucket = CategoryBucket(
            category=Category.NURSING,
            staffs=[StaffRecord(name="a", working_hours=None), StaffRecord(name="b", working_hours=80)],
        )
        stats = aggregate_category(bucket, 160)
        assert stats.total_working_hours == 80
        assert stats.total_equivalent == pytest.approx(0.5)

    def test_explicit_equivalent_ratio_is_used(self):
        bucket = CategoryBucket(
            category=Category.NURSING,
            staffs=[
                StaffRecord(name="a", working_hours=100, equivalent_ratio=1.0),
                StaffRecord(name="b", working_hours=80),
            ],
        )
        stats = aggregate_category(bucket, 160)
        assert stats.total_equivalent == pytest.approx(1.5)

    def test_hours_invariant_under_reordering(self, nursing_bucket):
        reversed_bucket = CategoryBucket(
            category=nursing_bucket.category, staffs=tuple(reversed(nursing_bucket.staffs))
        )
        a = aggregate_category(nursing_bucket, 160)
        b = aggregate_category(reversed_bucket, 160)
        assert a.total_working_hours == b.total_working_hours
        assert a.total_equivalent == pytest.approx(b.total_equivalent)

    def test_full_precision_is_kept(self):
        bucket = CategoryBucket(
            category=Category.NURSING, staffs=[StaffRecord(name="a", working_hours=100)]
        )
        stats = aggregate_category(bucket, 160, bed_count=3)
        assert stats.total_equivalent == 100 / 160
        assert stats.bed_percentage == 100 / 160 / 3 * 100


class TestBedPercentage:
    def test_exact_value(self):
        assert bed_percentage(2.5, 10) == 2.5 / 10 * 100

    @pytest.mark.parametrize("equivalent,beds", [(2.5, None), (0.0, 10), (2.5, 0), (2.5, -1)])
    def test_absent_cases(self, equivalent, beds):
        assert bed_percentage(equivalent, beds) is None
