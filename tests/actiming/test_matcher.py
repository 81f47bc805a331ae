"""Tests for registration matching."""

from __future__ import annotations

from actiming.matcher import (
    MatchMode,
    RegistrationMatcher,
    is_registered,
    matches_participant_candidate,
)
from actiming.models.participant import NormalizedParticipant
from actiming.names import to_car_tokens
from tests.conftest import make_entry

IVAN_NO_CAR = NormalizedParticipant(name_key="ivan ivanov", car_class="gt3", has_declared_car=False)
IVAN_LADA = NormalizedParticipant(
    name_key="ivan ivanov",
    car_class="серебро",
    has_declared_car=True,
    car_tokens=to_car_tokens("LADA Vesta NG Super-production"),
)


class TestCandidateMatch:
    def test_class_only_fallback(self) -> None:
        assert matches_participant_candidate(IVAN_NO_CAR, "gt3", to_car_tokens("anything"))
        assert not matches_participant_candidate(IVAN_NO_CAR, "gt4", ())

    def test_token_overlap(self) -> None:
        assert matches_participant_candidate(IVAN_LADA, "серебро", to_car_tokens("LADA Vesta NG TCR"))
        assert not matches_participant_candidate(
            IVAN_LADA, "серебро", to_car_tokens("Hyundai Elantra N TCR"),
        )


class TestRegistrationMatcher:
    def test_class_only(self) -> None:
        matcher = RegistrationMatcher([IVAN_NO_CAR])
        assert matcher.is_registered(make_entry(car_class="GT3", car_name="Whatever"))
        assert not matcher.is_registered(make_entry(car_class="GT4"))

    def test_car_tokens(self) -> None:
        matcher = RegistrationMatcher([IVAN_LADA])
        assert matcher.is_registered(make_entry(car_class="Серебро", car_name="LADA Vesta NG TCR"))
        assert not matcher.is_registered(
            make_entry(car_class="Серебро", car_name="Hyundai Elantra N TCR"),
        )

    def test_name_order_and_case(self) -> None:
        matcher = RegistrationMatcher([IVAN_NO_CAR])
        assert matcher.is_registered(make_entry(driver_name="IVANOV  Ivan", car_class="gt3"))

    def test_any_candidate(self) -> None:
        matcher = RegistrationMatcher([IVAN_LADA, IVAN_NO_CAR])
        assert len(matcher.candidates("Ivan Ivanov")) == 2
        assert matcher.is_registered(make_entry(car_class="GT3", car_name="Audi R8"))

    def test_name_only(self) -> None:
        matcher = RegistrationMatcher([IVAN_LADA])
        entry = make_entry(car_class="GT4", car_name="Hyundai")
        assert not matcher.is_registered(entry)
        assert matcher.is_registered(entry, MatchMode.NAME_ONLY)

    def test_unknown_driver(self) -> None:
        matcher = RegistrationMatcher([IVAN_NO_CAR])
        assert not matcher.is_registered(make_entry(driver_name="Petr Petrov"), MatchMode.NAME_ONLY)

    def test_empty_roster(self) -> None:
        matcher = RegistrationMatcher()
        assert len(matcher) == 0
        assert not matcher.is_registered(make_entry(), MatchMode.NAME_ONLY)

    def test_function_form(self) -> None:
        matcher = RegistrationMatcher([IVAN_NO_CAR])
        assert is_registered(make_entry(car_class="gt3"), matcher)

    def test_custom_overlap(self) -> None:
        matcher = RegistrationMatcher([IVAN_LADA], min_overlap=1)
        assert matcher.is_registered(make_entry(car_class="Серебро", car_name="Lada Granta"))


class TestMatchMode:
    def test_from_flag(self) -> None:
        assert MatchMode.from_flag(True) is MatchMode.NAME_ONLY
        assert MatchMode.from_flag(False) is MatchMode.STRICT
