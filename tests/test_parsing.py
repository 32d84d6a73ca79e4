"""Parsing Tests for IntakeAgent

Tests the edge cases of raw form input to ensure robustness.
"""
import pytest

from agents.intake_agent import IntakeAgent, InvalidInputError
from models.health import ActivityLevel, Gender
from models.insurance import Zone


@pytest.fixture
def agent():
    return IntakeAgent()


@pytest.mark.parametrize("raw, expected", [
    ("70", 70.0),
    ("70.5", 70.5),
    ("70.5 kg", 70.5),
    ("  170 cm ", 170.0),
    ("70-72", 71.0),
    ("5 to 6", 5.5),
    ("-500", -500.0),
    (65, 65.0),
    (72.5, 72.5),
])
def test_float_parsing(agent, raw, expected):
    assert agent.parse_float(raw) == expected


@pytest.mark.parametrize("raw", ["", "abc", "kg", None, True])
def test_float_parsing_rejects_non_numbers(agent, raw):
    assert agent.parse_float(raw) is None


def test_int_parsing(agent):
    assert agent.parse_int("4 people") == 4
    assert agent.parse_int("3-4") == 4
    assert agent.parse_int("two") is None


def test_int_parsing_rounds_halves_up(agent):
    assert agent.parse_int("2.5") == 3
    assert agent.parse_int("4.5 people") == 5


@pytest.mark.parametrize("raw, expected", [
    ("male", Gender.MALE),
    ("M", Gender.MALE),
    ("Man", Gender.MALE),
    ("female", Gender.FEMALE),
    (" f ", Gender.FEMALE),
    ("woman", Gender.FEMALE),
    (Gender.FEMALE, Gender.FEMALE),
    ("other", None),
    (None, None),
])
def test_gender_parsing(agent, raw, expected):
    assert agent.parse_gender(raw) == expected


@pytest.mark.parametrize("raw, expected", [
    (True, True),
    ("yes", True),
    ("Y", True),
    ("1", True),
    ("no", False),
    ("false", False),
    ("maybe", None),
])
def test_bool_parsing(agent, raw, expected):
    assert agent.parse_bool(raw) is expected


@pytest.mark.parametrize("raw, expected", [
    (None, 0),
    ("lose", -500),
    ("Lose Weight", -500),
    ("maintain", 0),
    ("gain", 500),
    ("-250", -250),
    ("+300", 300),
    ("bulk", None),
])
def test_goal_parsing(agent, raw, expected):
    assert agent.parse_goal(raw) == expected


class TestFormParsing:

    def test_biometrics_from_form(self, agent):
        biometrics = agent.parse_biometrics({
            "weight_kg": "68.5",
            "height": "165 cm",
            "age": "41",
            "sex": "F",
            "activity_level": "Very_Active",
            "goal": "gain",
        })
        assert biometrics.weight_kg == 68.5
        assert biometrics.height_cm == 165.0
        assert biometrics.age_years == 41
        assert biometrics.gender is Gender.FEMALE
        assert biometrics.activity_level is ActivityLevel.VERY_ACTIVE
        assert biometrics.goal_delta == 500

    def test_activity_defaults_to_moderate_when_absent(self, agent):
        biometrics = agent.parse_biometrics({"weight": 70, "height": 170, "age": 25, "gender": "m"})
        assert biometrics.activity_level is ActivityLevel.MODERATE
        assert biometrics.goal_delta == 0

    def test_out_of_range_values_are_rejected(self, agent):
        with pytest.raises(InvalidInputError) as exc_info:
            agent.parse_biometrics({"weight": "0", "height": "900", "age": "30", "gender": "male"})

        assert set(exc_info.value.fields) == {"weight_kg", "height_cm"}
        assert isinstance(exc_info.value, ValueError)

    def test_blank_fields_count_as_missing(self, agent):
        with pytest.raises(InvalidInputError) as exc_info:
            agent.parse_biometrics({"weight": "  ", "height": "170", "age": "30", "gender": "male"})
        assert exc_info.value.fields["weight_kg"] == "required"

    def test_premium_from_form(self, agent):
        request = agent.parse_premium({
            "age": "52",
            "coverage": "1000000",
            "family_size": "4",
            "has_pre_existing": "yes",
            "zone": "Zone 2",
        })
        assert request.age == 52
        assert request.coverage == "1000000"
        assert request.members == 4
        assert request.has_pre_existing is True
        assert request.zone is Zone.ZONE2

    def test_premium_rejects_bad_family_size(self, agent):
        with pytest.raises(InvalidInputError) as exc_info:
            agent.parse_premium({"age": "30", "members": "0"})
        assert "members" in exc_info.value.fields
