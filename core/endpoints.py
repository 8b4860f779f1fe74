# =============================================================================
# core/endpoints.py  —  Request Builders (tool arguments → upstream request)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   One pure function per MCP tool.  Each takes the tool's (already
#   validated) arguments and returns a RequestDescriptor: the endpoint path
#   with path segments interpolated, plus the query parameters renamed to the
#   keys eBird expects.
#
#   Keeping this separate from tools/mcp_server.py means the mapping can be
#   tested without FastMCP, httpx, or a network.
#
# THE RENAMING TABLE:
#   External (snake_case) names are mapped to upstream keys EXPLICITLY in
#   UPSTREAM_KEYS below.  Nothing is inferred by case conversion, so a typo
#   in a tool signature cannot silently produce a wrong query key.
#
# OPTIONAL ARGUMENTS:
#   An optional argument is sent iff it was supplied (`is not None`).  This is
#   a presence check, not a truthiness check: dist=0 IS sent.  Arguments the
#   caller omitted never appear in the query, not even as an empty value.
#
# PATH SEGMENTS:
#   Region codes, species codes, dates, and ids are interpolated as-is.  Any
#   escaping is left to httpx when the URL is built.
# =============================================================================

from typing import Optional

from core.models import QueryValue, RequestDescriptor

# External argument name → eBird query key.
UPSTREAM_KEYS: dict[str, str] = {
    "back": "back",
    "cat": "cat",
    "delim": "delim",
    "detail": "detail",
    "dist": "dist",
    "fmt": "fmt",
    "group_name_locale": "groupNameLocale",
    "hotspot": "hotspot",
    "include_provisional": "includeProvisional",
    "lat": "lat",
    "lng": "lng",
    "locale": "locale",
    "max_results": "maxResults",
    "rank": "rank",
    "ranked_by": "rankedBy",
    "region_name_format": "regionNameFormat",
    "sort": "sort",
    "sort_key": "sortKey",
    "species": "species",
    "spp_locale": "sppLocale",
    "version": "version",
}


def _query(required: dict[str, QueryValue], **optional: Optional[QueryValue]) -> dict[str, QueryValue]:
    """Rename arguments to upstream keys, appending supplied optionals last."""
    params = {UPSTREAM_KEYS[name]: value for name, value in required.items()}
    for name, value in optional.items():
        if value is not None:
            params[UPSTREAM_KEYS[name]] = value
    return params


def _date_path(prefix: str, region_code: str, year: int, month: int, day: int) -> str:
    return f"{prefix}/{region_code}/{year}/{month}/{day}"


# =============================================================================
# OBSERVATIONS
# =============================================================================

def recent_observations(
    region_code: str,
    back: int = 14,
    cat: Optional[str] = None,
    hotspot: bool = False,
    include_provisional: bool = False,
    max_results: Optional[int] = None,
    spp_locale: str = "en",
) -> RequestDescriptor:
    return RequestDescriptor(
        path=f"/data/obs/{region_code}/recent",
        params=_query(
            {
                "back": back,
                "hotspot": hotspot,
                "include_provisional": include_provisional,
                "spp_locale": spp_locale,
            },
            cat=cat,
            max_results=max_results,
        ),
    )


def notable_observations(
    region_code: str,
    back: int = 14,
    detail: str = "simple",
    hotspot: bool = False,
    max_results: Optional[int] = None,
    spp_locale: str = "en",
) -> RequestDescriptor:
    return RequestDescriptor(
        path=f"/data/obs/{region_code}/recent/notable",
        params=_query(
            {"back": back, "detail": detail, "hotspot": hotspot, "spp_locale": spp_locale},
            max_results=max_results,
        ),
    )


def species_observations(
    region_code: str,
    species_code: str,
    back: int = 14,
    hotspot: bool = False,
    include_provisional: bool = False,
    max_results: Optional[int] = None,
    spp_locale: str = "en",
) -> RequestDescriptor:
    return RequestDescriptor(
        path=f"/data/obs/{region_code}/recent/{species_code}",
        params=_query(
            {
                "back": back,
                "hotspot": hotspot,
                "include_provisional": include_provisional,
                "spp_locale": spp_locale,
            },
            max_results=max_results,
        ),
    )


def nearby_observations(
    lat: float,
    lng: float,
    back: int = 14,
    cat: Optional[str] = None,
    dist: float = 25,
    hotspot: bool = False,
    include_provisional: bool = False,
    max_results: Optional[int] = None,
    sort: str = "date",
    spp_locale: str = "en",
) -> RequestDescriptor:
    return RequestDescriptor(
        path="/data/obs/geo/recent",
        params=_query(
            {
                "lat": lat,
                "lng": lng,
                "back": back,
                "dist": dist,
                "hotspot": hotspot,
                "include_provisional": include_provisional,
                "sort": sort,
                "spp_locale": spp_locale,
            },
            cat=cat,
            max_results=max_results,
        ),
    )


def nearby_species_observations(
    lat: float,
    lng: float,
    species_code: str,
    back: int = 14,
    dist: float = 25,
    hotspot: bool = False,
    include_provisional: bool = False,
    max_results: Optional[int] = None,
    spp_locale: str = "en",
) -> RequestDescriptor:
    return RequestDescriptor(
        path=f"/data/obs/geo/recent/{species_code}",
        params=_query(
            {
                "lat": lat,
                "lng": lng,
                "back": back,
                "dist": dist,
                "hotspot": hotspot,
                "include_provisional": include_provisional,
                "spp_locale": spp_locale,
            },
            max_results=max_results,
        ),
    )


def nearest_species_observations(
    lat: float,
    lng: float,
    species_code: str,
    back: int = 14,
    hotspot: bool = False,
    include_provisional: bool = False,
    max_results: int = 3000,
    dist: Optional[float] = None,
    spp_locale: str = "en",
) -> RequestDescriptor:
    return RequestDescriptor(
        path=f"/data/nearest/geo/recent/{species_code}",
        params=_query(
            {
                "lat": lat,
                "lng": lng,
                "back": back,
                "hotspot": hotspot,
                "include_provisional": include_provisional,
                "max_results": max_results,
                "spp_locale": spp_locale,
            },
            dist=dist,
        ),
    )


def nearby_notable_observations(
    lat: float,
    lng: float,
    back: int = 14,
    detail: str = "simple",
    dist: float = 25,
    hotspot: bool = False,
    max_results: Optional[int] = None,
    spp_locale: str = "en",
) -> RequestDescriptor:
    return RequestDescriptor(
        path="/data/obs/geo/recent/notable",
        params=_query(
            {
                "lat": lat,
                "lng": lng,
                "back": back,
                "detail": detail,
                "dist": dist,
                "hotspot": hotspot,
                "spp_locale": spp_locale,
            },
            max_results=max_results,
        ),
    )


def historic_observations(
    region_code: str,
    year: int,
    month: int,
    day: int,
    cat: Optional[str] = None,
    detail: str = "simple",
    hotspot: bool = False,
    include_provisional: bool = False,
    max_results: Optional[int] = None,
    rank: str = "mrec",
    spp_locale: str = "en",
) -> RequestDescriptor:
    return RequestDescriptor(
        path=f"/data/obs/{region_code}/historic/{year}/{month}/{day}",
        params=_query(
            {
                "detail": detail,
                "hotspot": hotspot,
                "include_provisional": include_provisional,
                "rank": rank,
                "spp_locale": spp_locale,
            },
            cat=cat,
            max_results=max_results,
        ),
    )


# =============================================================================
# PRODUCTS
# =============================================================================

def top_100(
    region_code: str,
    year: int,
    month: int,
    day: int,
    ranked_by: str = "spp",
    max_results: Optional[int] = None,
) -> RequestDescriptor:
    return RequestDescriptor(
        path=_date_path("/product/top100", region_code, year, month, day),
        params=_query({"ranked_by": ranked_by}, max_results=max_results),
    )


def recent_checklists(region_code: str, max_results: int = 10) -> RequestDescriptor:
    return RequestDescriptor(
        path=f"/product/lists/{region_code}",
        params=_query({"max_results": max_results}),
    )


def checklists_on_date(
    region_code: str,
    year: int,
    month: int,
    day: int,
    sort_key: str = "obs_dt",
    max_results: int = 10,
) -> RequestDescriptor:
    return RequestDescriptor(
        path=_date_path("/product/lists", region_code, year, month, day),
        params=_query({"sort_key": sort_key, "max_results": max_results}),
    )


def regional_statistics(region_code: str, year: int, month: int, day: int) -> RequestDescriptor:
    return RequestDescriptor(path=_date_path("/product/stats", region_code, year, month, day))


def species_list(region_code: str) -> RequestDescriptor:
    return RequestDescriptor(path=f"/product/spplist/{region_code}")


def checklist(sub_id: str) -> RequestDescriptor:
    return RequestDescriptor(path=f"/product/checklist/view/{sub_id}")


# =============================================================================
# REFERENCE: GEOGRAPHY & HOTSPOTS
# =============================================================================

def adjacent_regions(region_code: str) -> RequestDescriptor:
    return RequestDescriptor(path=f"/ref/adjacent/{region_code}")


def hotspots_in_region(region_code: str, back: Optional[int] = None, fmt: str = "json") -> RequestDescriptor:
    return RequestDescriptor(
        path=f"/ref/hotspot/{region_code}",
        params=_query({"fmt": fmt}, back=back),
    )


def nearby_hotspots(
    lat: float,
    lng: float,
    back: Optional[int] = None,
    dist: float = 25,
    fmt: str = "json",
) -> RequestDescriptor:
    return RequestDescriptor(
        path="/ref/hotspot/geo",
        params=_query({"lat": lat, "lng": lng, "dist": dist, "fmt": fmt}, back=back),
    )


def hotspot_info(loc_id: str) -> RequestDescriptor:
    return RequestDescriptor(path=f"/ref/hotspot/info/{loc_id}")


# =============================================================================
# REFERENCE: TAXONOMY
# =============================================================================

def taxonomy(
    cat: Optional[str] = None,
    fmt: str = "json",
    locale: str = "en",
    species: Optional[str] = None,
    version: Optional[str] = None,
) -> RequestDescriptor:
    return RequestDescriptor(
        path="/ref/taxonomy/ebird",
        params=_query(
            {"fmt": fmt, "locale": locale},
            cat=cat,
            species=species,
            version=version,
        ),
    )


def taxonomic_forms(species_code: str) -> RequestDescriptor:
    return RequestDescriptor(path=f"/ref/taxon/forms/{species_code}")


def taxa_locales() -> RequestDescriptor:
    return RequestDescriptor(path="/ref/taxa-locales/ebird")


def taxonomy_versions() -> RequestDescriptor:
    return RequestDescriptor(path="/ref/taxonomy/versions")


def taxonomic_groups(species_grouping: str = "ebird", group_name_locale: str = "en") -> RequestDescriptor:
    return RequestDescriptor(
        path=f"/ref/sppgroup/{species_grouping}",
        params=_query({"group_name_locale": group_name_locale}),
    )


# =============================================================================
# REFERENCE: REGION
# =============================================================================

def region_info(region_code: str, region_name_format: str = "full", delim: str = ", ") -> RequestDescriptor:
    return RequestDescriptor(
        path=f"/ref/region/info/{region_code}",
        params=_query({"region_name_format": region_name_format, "delim": delim}),
    )


def sub_regions(region_type: str, parent_region_code: str, fmt: str = "json") -> RequestDescriptor:
    return RequestDescriptor(
        path=f"/ref/region/list/{region_type}/{parent_region_code}",
        params=_query({"fmt": fmt}),
    )
