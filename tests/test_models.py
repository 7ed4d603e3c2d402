# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the Pydantic models to ensure:
# - Valid data is accepted and parsed correctly
# - Invalid data raises ValidationError
# - Default values work as expected
#
# Run with: poetry run pytest tests/test_models.py -v
# =============================================================================

from datetime import datetime

import pytest
from pydantic import ValidationError

# Import all models from the core package
from core.models import (
    AddressData,
    CollectionPointCreate,
    CollectionPointResponse,
    CollectionPointUpdate,
    MAX_RATING,
    MIN_RATING,
    OperatorProfile,
    ReportCreate,
    ReportResponse,
    ReportStatus,
    ReportType,
    ReviewCreate,
    ReviewUpdate,
    ScheduleData,
    UserRegister,
    UserResponse,
    UserRole,
    WasteTypeCreate,
)


# =============================================================================
# User Model Tests
# =============================================================================

class TestUserRegister:
    """Tests for UserRegister model."""

    def test_defaults_to_user_role(self):
        """Test that a plain registration is a USER account."""
        user = UserRegister(
            email="mario.rossi@example.com",
            password="Password123!",
            name="Mario",
            surname="Rossi",
        )

        assert user.role == UserRole.USER
        assert user.operator is None
        assert user.cellphone is None

    def test_operator_with_profile(self):
        """Test that operators carry their organization block."""
        user = UserRegister(
            email="ama@example.com",
            password="Password123!",
            name="AMA",
            surname="Roma",
            role="OPERATOR",
            operator={"organization_name": "AMA S.p.A."},
        )

        assert isinstance(user.operator, OperatorProfile)
        assert user.operator.organization_name == "AMA S.p.A."

    def test_operator_requires_profile(self):
        with pytest.raises(ValidationError) as exc_info:
            UserRegister(
                email="ama@example.com",
                password="Password123!",
                name="AMA",
                surname="Roma",
                role="OPERATOR",
            )

        assert "operator" in str(exc_info.value)

    def test_profile_only_for_operators(self):
        with pytest.raises(ValidationError):
            UserRegister(
                email="mario@example.com",
                password="Password123!",
                name="Mario",
                surname="Rossi",
                role="CLIENT",
                operator={"organization_name": "Nope"},
            )

    def test_admin_rejected(self):
        with pytest.raises(ValidationError):
            UserRegister(
                email="root@example.com",
                password="Password123!",
                name="Root",
                surname="Admin",
                role="ADMIN",
            )

    @pytest.mark.parametrize("password", ["short", "x" * 73])
    def test_password_length(self, password):
        """Test bcrypt-compatible password bounds."""
        with pytest.raises(ValidationError):
            UserRegister(email="a@example.com", password=password, name="A", surname="B")

    def test_invalid_email(self):
        with pytest.raises(ValidationError):
            UserRegister(email="not-an-email", password="Password123!", name="A", surname="B")


class TestUserResponse:
    """Tests for UserResponse model."""

    def test_ignores_password_column(self):
        """Test that extra columns such as the hash are not exposed."""
        user = UserResponse(
            id=1,
            email="mario@example.com",
            name="Mario",
            surname="Rossi",
            role="USER",
            password="$2b$10$hash",
            created_at="2025-01-01T00:00:00+00:00",
        )

        assert "password" not in user.model_dump()
        assert isinstance(user.created_at, datetime)


# =============================================================================
# Waste Type Model Tests
# =============================================================================

class TestWasteTypeCreate:
    """Tests for WasteTypeCreate model."""

    def test_default_color(self):
        waste_type = WasteTypeCreate(name="Organico")

        assert waste_type.color == "#808080"

    @pytest.mark.parametrize("color", ["red", "#12345", "#GGGGGG", "808080"])
    def test_invalid_color(self, color):
        with pytest.raises(ValidationError):
            WasteTypeCreate(name="Organico", color=color)


# =============================================================================
# Collection Point Model Tests
# =============================================================================

class TestScheduleData:
    """Tests for ScheduleData model."""

    def test_all_days_closed_by_default(self):
        schedule = ScheduleData()

        assert not any([
            schedule.monday, schedule.tuesday, schedule.wednesday, schedule.thursday,
            schedule.friday, schedule.saturday, schedule.sunday,
        ])
        assert schedule.is_always_open is False

    def test_valid_hours(self):
        schedule = ScheduleData(monday=True, opening_time="08:00", closing_time="20:00")

        assert schedule.opening_time == "08:00"

    def test_closing_before_opening(self):
        with pytest.raises(ValidationError) as exc_info:
            ScheduleData(opening_time="20:00", closing_time="08:00")

        assert "closing_time" in str(exc_info.value)

    @pytest.mark.parametrize("value", ["8:00", "24:00", "12:60", "noon"])
    def test_bad_time_format(self, value):
        with pytest.raises(ValidationError):
            ScheduleData(opening_time=value)


class TestCollectionPointModels:
    """Tests for collection point input/output models."""

    def test_create_requires_address(self):
        with pytest.raises(ValidationError):
            CollectionPointCreate(name="Isola Ecologica")

    def test_create_defaults(self):
        point = CollectionPointCreate(
            name="Isola Ecologica",
            address={"street": "Via Roma", "city": "Roma"},
        )

        assert point.is_active is True
        assert point.schedule is None
        assert point.waste_type_ids == []
        assert point.address.country == "Italia"

    def test_create_has_no_avg_rating(self):
        """avg_rating is derived and never accepted as input."""
        point = CollectionPointCreate(
            name="Isola Ecologica",
            address={"street": "Via Roma", "city": "Roma"},
            avg_rating=5,
        )

        assert "avg_rating" not in point.model_dump()

    @pytest.mark.parametrize("latitude", [-91, 91])
    def test_latitude_bounds(self, latitude):
        with pytest.raises(ValidationError):
            AddressData(street="Via Roma", city="Roma", latitude=latitude)

    def test_update_tracks_unset_fields(self):
        update = CollectionPointUpdate(name="Nuovo nome")

        assert update.model_dump(exclude_unset=True) == {"name": "Nuovo nome"}

    def test_response_defaults(self):
        point = CollectionPointResponse(id=1, operator_id=2, name="Isola")

        assert point.avg_rating is None
        assert point.waste_types == []


# =============================================================================
# Review Model Tests
# =============================================================================

class TestReviewModels:
    """Tests for ReviewCreate and ReviewUpdate."""

    @pytest.mark.parametrize("rating", [MIN_RATING, 3, MAX_RATING])
    def test_rating_in_range(self, rating):
        review = ReviewCreate(collection_point_id=1, rating=rating)

        assert review.rating == rating

    @pytest.mark.parametrize("rating", [MIN_RATING - 1, MAX_RATING + 1])
    def test_rating_out_of_range(self, rating):
        with pytest.raises(ValidationError):
            ReviewCreate(collection_point_id=1, rating=rating)

    def test_collection_point_must_be_positive(self):
        with pytest.raises(ValidationError):
            ReviewCreate(collection_point_id=0, rating=3)

    def test_update_needs_a_field(self):
        with pytest.raises(ValidationError):
            ReviewUpdate()

    def test_text_only_update(self):
        update = ReviewUpdate(text="Migliorato")

        assert update.model_dump(exclude_unset=True) == {"text": "Migliorato"}

    def test_text_can_be_cleared(self):
        update = ReviewUpdate(text=None)

        assert update.model_dump(exclude_unset=True) == {"text": None}

    def test_rating_cannot_be_null(self):
        with pytest.raises(ValidationError):
            ReviewUpdate(rating=None, text="Ok")


# =============================================================================
# Report Model Tests
# =============================================================================

class TestReportModels:
    """Tests for report models and enums."""

    def test_report_types(self):
        assert {t.value for t in ReportType} == {
            "FULL_BIN", "NEEDS_CLEANING", "DAMAGED", "ILLEGAL_DUMPING", "OTHER",
        }

    def test_create(self):
        report = ReportCreate(collection_point_id=3, type="DAMAGED", description="Coperchio rotto")

        assert report.type == ReportType.DAMAGED

    def test_description_required(self):
        with pytest.raises(ValidationError):
            ReportCreate(collection_point_id=3, type="DAMAGED", description="")

    def test_response_parses_timestamps(self):
        report = ReportResponse(
            id=1,
            user_id=2,
            collection_point_id=3,
            type="FULL_BIN",
            status="RESOLVED",
            resolved_by=4,
            resolved_at="2025-03-01T10:00:00+00:00",
        )

        assert report.status == ReportStatus.RESOLVED
        assert isinstance(report.resolved_at, datetime)
