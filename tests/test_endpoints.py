"""Tests for the pure request builders in core/endpoints.py."""

from core import endpoints
from core.models import RequestDescriptor


def test_recent_observations_defaults():
    request = endpoints.recent_observations("US-NY", back=7)

    assert request == RequestDescriptor(
        path="/data/obs/US-NY/recent",
        params={"back": 7, "hotspot": False, "includeProvisional": False, "sppLocale": "en"},
    )


def test_optional_arguments_are_appended_after_defaults():
    request = endpoints.recent_observations("US-NY", cat="species", max_results=5)

    assert list(request.params) == [
        "back", "hotspot", "includeProvisional", "sppLocale", "cat", "maxResults",
    ]


def test_presence_check_keeps_zero():
    request = endpoints.nearest_species_observations(1.0, 2.0, "cangoo", dist=0)
    assert request.params["dist"] == 0


def test_omitted_optional_is_not_a_key():
    request = endpoints.nearest_species_observations(1.0, 2.0, "cangoo")
    assert "dist" not in request.params
    assert None not in request.params.values()


def test_path_segments_are_interpolated_verbatim():
    assert endpoints.historic_observations("US-NY-109", 2024, 5, 12).path == (
        "/data/obs/US-NY-109/historic/2024/5/12"
    )
    assert endpoints.sub_regions("country", "world").path == "/ref/region/list/country/world"
    assert endpoints.taxonomic_groups().path == "/ref/sppgroup/ebird"


def test_parameterless_endpoints_have_no_query():
    for request in (
        endpoints.taxa_locales(),
        endpoints.taxonomy_versions(),
        endpoints.checklist("S29893687"),
        endpoints.regional_statistics("US-NY", 2024, 5, 11),
    ):
        assert request.params == {}


def test_renaming_table_only_produces_upstream_spellings():
    assert endpoints.UPSTREAM_KEYS["include_provisional"] == "includeProvisional"
    assert endpoints.UPSTREAM_KEYS["group_name_locale"] == "groupNameLocale"
    assert endpoints.UPSTREAM_KEYS["region_name_format"] == "regionNameFormat"
    assert all("_" not in key for key in endpoints.UPSTREAM_KEYS.values())
