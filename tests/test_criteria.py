"""Tests de normalizador y criterios individuales."""

from datetime import date

import pytest

from propmate.matching.criteria import (
    score_availability,
    score_bhk,
    score_budget,
    score_furnishing,
    score_lifestyle,
    score_location,
)
from propmate.matching.normalizer import (
    day_gap,
    normalize_client,
    normalize_pair,
    normalize_property,
    normalize_text,
)

from conftest import make_client, make_property


def pair(client_overrides=None, property_overrides=None):
    return normalize_pair(
        make_client(**(client_overrides or {})),
        make_property(**(property_overrides or {})),
    )


class TestNormalizer:
    def test_normalize_text(self):
        assert normalize_text("  Andheri   West ") == "andheri west"
        assert normalize_text(None) == ""

    def test_negative_price_is_invalid(self):
        assert normalize_property(make_property(price=-10)).price is None

    def test_budget_range_swapped_when_inverted(self):
        client = normalize_client(make_client(budgetMin=40000, budgetMax=30000))
        assert (client.budget_min, client.budget_max) == (30000, 40000)

    def test_missing_budget_min_means_zero(self):
        client = normalize_client(make_client(budgetMin=None))
        assert client.budget_min == 0.0

    def test_zero_budget_max_is_a_valid_cap(self):
        client = normalize_client(make_client(budgetMin=0, budgetMax=0))
        assert (client.budget_min, client.budget_max) == (0.0, 0.0)

    def test_areas_are_canonical_and_unique(self):
        client = normalize_client(make_client(preferredAreas=[" Bandra ", "bandra", "", "Juhu"]))
        assert client.areas == ("bandra", "juhu")

    def test_furnishing_any_on_property_is_invalid(self):
        prop = normalize_property(make_property(furnishing="Any"))
        assert prop.furnishing is None
        assert prop.furnishing_level is None

    def test_client_furnishing_wildcard(self):
        client = normalize_client(make_client(furnishingPreference=["Any", "Fully"]))
        assert client.accepts_any_furnishing is True
        assert client.furnishing_levels == frozenset({2})

    def test_day_gap_is_absolute(self):
        assert day_gap(date(2024, 6, 1), date(2024, 6, 11)) == 10
        assert day_gap(date(2024, 6, 11), date(2024, 6, 1)) == 10
        assert day_gap(None, date(2024, 6, 1)) is None


class TestBudget:
    @pytest.mark.parametrize(
        "price, expected",
        [
            (25000, 100),
            (30000, 100),
            (20000, 100),
            (15000, 100),
            (33000, 90),
            (45000, 50),
            (60000, 0),
            (90000, 0),
        ],
    )
    def test_decay_above_budget(self, price, expected):
        assert score_budget(pair(property_overrides={"price": price})) == pytest.approx(expected)

    def test_invalid_price_scores_zero(self):
        assert score_budget(pair(property_overrides={"price": -5})) == 0
        assert score_budget(pair(property_overrides={"price": "POA"})) == 0

    def test_missing_budget_scores_zero(self):
        assert score_budget(pair(client_overrides={"budgetMax": None})) == 0

    def test_zero_budget_cap(self):
        zero_budget = {"budgetMin": 0, "budgetMax": 0}
        free = pair(client_overrides=zero_budget, property_overrides={"price": 0})
        paid = pair(client_overrides=zero_budget, property_overrides={"price": 1000})
        assert score_budget(free) == 100
        assert score_budget(paid) == 0


class TestLocation:
    def test_exact_area_case_insensitive(self):
        result = score_location(pair(property_overrides={"location": {"area": "  andheri WEST "}}))
        assert result == 100

    def test_same_city_other_area(self):
        assert score_location(pair(property_overrides={"location": {"area": "Juhu"}})) == 50

    def test_different_city(self):
        result = score_location(
            pair(property_overrides={"location": {"area": "Andheri West", "city": "Pune"}})
        )
        assert result == 0

    def test_no_area_preference_city_match_is_enough(self):
        result = score_location(
            pair(
                client_overrides={"preferredAreas": []},
                property_overrides={"location": {"area": "Powai", "city": "MUMBAI"}},
            )
        )
        assert result == 100

    def test_no_city_preference_compares_areas(self):
        assert score_location(pair(client_overrides={"preferredCity": ""})) == 100
        result = score_location(
            pair(client_overrides={"preferredCity": ""}, property_overrides={"location": {"area": "Juhu"}})
        )
        assert result == 0

    def test_property_without_location(self):
        result = score_location(pair(property_overrides={"location": {"area": "", "city": ""}}))
        assert result == 0


class TestBhk:
    @pytest.mark.parametrize(
        "bhk, expected",
        [
            ("2BHK", 100),
            ("3BHK", 60),
            ("1BHK", 60),
            ("4BHK", 20),
            ("1RK", 20),
            ("5BHK+", 0),
            ("castle", 0),
        ],
    )
    def test_steps_on_canonical_order(self, bhk, expected):
        assert score_bhk(pair(property_overrides={"bhk": bhk})) == expected

    def test_closest_accepted_configuration_wins(self):
        result = score_bhk(
            pair(client_overrides={"bhkPreference": ["1BHK", "4BHK"]}, property_overrides={"bhk": "3BHK"})
        )
        assert result == 60

    def test_no_preference_scores_zero(self):
        assert score_bhk(pair(client_overrides={"bhkPreference": []})) == 0


class TestFurnishing:
    @pytest.mark.parametrize(
        "wanted, offered, expected",
        [
            (["Semi"], "Semi", 100),
            (["Any"], "Unfurnished", 100),
            (["Semi"], "Fully", 60),
            (["Unfurnished"], "Fully", 20),
            (["Unfurnished", "Fully"], "Semi", 60),
        ],
    )
    def test_ordinal_distance(self, wanted, offered, expected):
        result = score_furnishing(
            pair(client_overrides={"furnishingPreference": wanted}, property_overrides={"furnishing": offered})
        )
        assert result == expected

    def test_missing_values_score_zero(self):
        assert score_furnishing(pair(property_overrides={"furnishing": None})) == 0
        assert score_furnishing(pair(client_overrides={"furnishingPreference": []})) == 0


class TestLifestyle:
    def test_married_no_penalty(self):
        assert score_lifestyle(pair(property_overrides={"bachelorsAllowed": False})) == 100

    def test_bachelor_not_allowed(self):
        result = score_lifestyle(
            pair(client_overrides={"maritalStatus": "Bachelor"}, property_overrides={"bachelorsAllowed": False})
        )
        assert result == 60

    def test_bachelor_allowed(self):
        assert score_lifestyle(pair(client_overrides={"maritalStatus": "Bachelor"})) == 100

    def test_large_family_without_parking(self):
        assert score_lifestyle(pair(client_overrides={"familySize": 5}, property_overrides={"parking": False})) == 80
        assert score_lifestyle(pair(client_overrides={"familySize": 4}, property_overrides={"parking": False})) == 100

    def test_penalties_add_up(self):
        result = score_lifestyle(
            pair(
                client_overrides={"maritalStatus": "Bachelor", "familySize": 6},
                property_overrides={"bachelorsAllowed": False, "parking": False},
            )
        )
        assert result == 40


class TestAvailability:
    @pytest.mark.parametrize(
        "available, expected",
        [
            ("2024-06-01", 100),
            ("2024-06-08", 100),
            ("2024-05-25", 100),
            ("2024-06-09", 100 - 100 / 90 * 8),
            ("2024-07-16", 50),
            ("2024-08-30", 0),
            ("2024-12-01", 0),
        ],
    )
    def test_linear_decay(self, available, expected):
        result = score_availability(pair(property_overrides={"availabilityDate": available}))
        assert result == pytest.approx(expected)

    def test_past_move_in_date_uses_absolute_gap(self):
        result = score_availability(
            pair(client_overrides={"moveInDate": "2024-04-17"}, property_overrides={"availabilityDate": "2024-06-01"})
        )
        assert result == pytest.approx(50)

    def test_missing_dates_score_zero(self):
        assert score_availability(pair(property_overrides={"availabilityDate": None})) == 0
        assert score_availability(pair(client_overrides={"moveInDate": "asap"})) == 0
