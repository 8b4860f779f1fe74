# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server for the eBird API 2.0
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines ALL MCP tools the host can call.  Each tool is a thin wrapper:
#   it takes validated arguments, asks core/endpoints.py for the matching
#   RequestDescriptor, sends it through the shared EBirdClient, and returns
#   eBird's JSON pretty-printed as text.
#
# HOW IT WORKS (the flow):
#   1. The host (e.g. the ADK agent in agent/) calls a tool by name via MCP
#   2. FastMCP validates the arguments against the annotated signature
#      (ranges, enums, required/optional); bad input never gets further
#   3. The handler builds the request and awaits ONE upstream GET
#   4. The JSON is returned verbatim as a text content block
#   5. Any EBirdError propagates; FastMCP reports it as the tool's error
#
# TOOL NAMING CONVENTIONS:
#   Every tool is a read-only get_* retrieval, idempotent and safe to retry.
#   The names match eBird's own endpoint groups: observations, products,
#   and reference data (geography, hotspots, taxonomy, regions).
#
# RUNNING THIS SERVER:
#     a) Standalone:  python -m tools.mcp_server   (or the `ebird-mcp` script)
#     b) Spawned over stdio by the ADK agent in agent/birding_agent.py
# =============================================================================

import json
import logging
import sys
from typing import Any

from dotenv import load_dotenv
from fastmcp import FastMCP

from core import endpoints
from core.client import EBirdClient
from core.config import load_settings
from core.errors import StartupConfigurationError
from core.models import RequestDescriptor
from tools.logging_utils import configure_logging, log_request, log_response, log_status
from tools.params import (
    Category,
    Day,
    DaysBack,
    Delim,
    Detail,
    Fmt,
    GroupNameLocale,
    HistoricYear,
    Hotspot,
    HotspotDistance,
    IncludeProvisional,
    Latitude,
    LocId,
    Longitude,
    MaxChecklists,
    MaxNearest,
    MaxObservations,
    MaxTop100,
    Month,
    ObsDistance,
    OptionalDaysBack,
    OptionalObsDistance,
    ParentRegionCode,
    Rank,
    RankedBy,
    RegionCode,
    RegionNameFormat,
    RegionType,
    Sort,
    SortKey,
    SpeciesCode,
    SpeciesGrouping,
    SppLocale,
    SubId,
    TaxonomySpecies,
    TaxonomyVersion,
    Year,
)

logger = logging.getLogger(__name__)

SERVER_NAME = "ebird"


def to_text(payload: Any) -> str:
    """Pretty-print an upstream JSON payload for the host (2-space indent)."""
    return json.dumps(payload, indent=2, ensure_ascii=False)


def create_server(client: EBirdClient) -> FastMCP:
    """Build the FastMCP server with every eBird tool bound to `client`.

    The client is the only thing the tools share.  It holds the immutable
    settings and opens a fresh HTTP connection per call, so concurrent tool
    invocations never coordinate with each other.
    """
    mcp = FastMCP(SERVER_NAME)

    async def dispatch(tool_name: str, request: RequestDescriptor) -> str:
        log_request(tool_name, path=request.path, **request.params)
        log_status(f"GET {client.build_url(request.path, request.params)}")
        payload = await client.fetch(request)
        return to_text(log_response(tool_name, payload))

    # =========================================================================
    # OBSERVATIONS
    # =========================================================================

    @mcp.tool()
    async def get_recent_observations(
        region_code: RegionCode,
        back: DaysBack = 14,
        cat: Category = None,
        hotspot: Hotspot = False,
        include_provisional: IncludeProvisional = False,
        max_results: MaxObservations = None,
        spp_locale: SppLocale = "en",
    ) -> str:
        """Get recent bird observations in a region (up to 30 days ago). Returns species, location, date, and count info."""
        return await dispatch("get_recent_observations", endpoints.recent_observations(
            region_code, back=back, cat=cat, hotspot=hotspot,
            include_provisional=include_provisional, max_results=max_results,
            spp_locale=spp_locale,
        ))

    @mcp.tool()
    async def get_notable_observations(
        region_code: RegionCode,
        back: DaysBack = 14,
        detail: Detail = "simple",
        hotspot: Hotspot = False,
        max_results: MaxObservations = None,
        spp_locale: SppLocale = "en",
    ) -> str:
        """Get recent notable/rare bird observations in a region. Notable observations are for locally or nationally rare species."""
        return await dispatch("get_notable_observations", endpoints.notable_observations(
            region_code, back=back, detail=detail, hotspot=hotspot,
            max_results=max_results, spp_locale=spp_locale,
        ))

    @mcp.tool()
    async def get_species_observations(
        region_code: RegionCode,
        species_code: SpeciesCode,
        back: DaysBack = 14,
        hotspot: Hotspot = False,
        include_provisional: IncludeProvisional = False,
        max_results: MaxObservations = None,
        spp_locale: SppLocale = "en",
    ) -> str:
        """Get recent observations of a specific species in a region."""
        return await dispatch("get_species_observations", endpoints.species_observations(
            region_code, species_code, back=back, hotspot=hotspot,
            include_provisional=include_provisional, max_results=max_results,
            spp_locale=spp_locale,
        ))

    @mcp.tool()
    async def get_nearby_observations(
        lat: Latitude,
        lng: Longitude,
        back: DaysBack = 14,
        cat: Category = None,
        dist: ObsDistance = 25,
        hotspot: Hotspot = False,
        include_provisional: IncludeProvisional = False,
        max_results: MaxObservations = None,
        sort: Sort = "date",
        spp_locale: SppLocale = "en",
    ) -> str:
        """Get recent observations near a geographic location."""
        return await dispatch("get_nearby_observations", endpoints.nearby_observations(
            lat, lng, back=back, cat=cat, dist=dist, hotspot=hotspot,
            include_provisional=include_provisional, max_results=max_results,
            sort=sort, spp_locale=spp_locale,
        ))

    @mcp.tool()
    async def get_nearby_species_observations(
        lat: Latitude,
        lng: Longitude,
        species_code: SpeciesCode,
        back: DaysBack = 14,
        dist: ObsDistance = 25,
        hotspot: Hotspot = False,
        include_provisional: IncludeProvisional = False,
        max_results: MaxObservations = None,
        spp_locale: SppLocale = "en",
    ) -> str:
        """Get recent observations of a specific species near a location."""
        return await dispatch("get_nearby_species_observations", endpoints.nearby_species_observations(
            lat, lng, species_code, back=back, dist=dist, hotspot=hotspot,
            include_provisional=include_provisional, max_results=max_results,
            spp_locale=spp_locale,
        ))

    @mcp.tool()
    async def get_nearest_species_observations(
        lat: Latitude,
        lng: Longitude,
        species_code: SpeciesCode,
        back: DaysBack = 14,
        hotspot: Hotspot = False,
        include_provisional: IncludeProvisional = False,
        max_results: MaxNearest = 3000,
        dist: OptionalObsDistance = None,
        spp_locale: SppLocale = "en",
    ) -> str:
        """Find the nearest locations where a species has been seen recently."""
        return await dispatch("get_nearest_species_observations", endpoints.nearest_species_observations(
            lat, lng, species_code, back=back, hotspot=hotspot,
            include_provisional=include_provisional, max_results=max_results,
            dist=dist, spp_locale=spp_locale,
        ))

    @mcp.tool()
    async def get_nearby_notable_observations(
        lat: Latitude,
        lng: Longitude,
        back: DaysBack = 14,
        detail: Detail = "simple",
        dist: ObsDistance = 25,
        hotspot: Hotspot = False,
        max_results: MaxObservations = None,
        spp_locale: SppLocale = "en",
    ) -> str:
        """Get notable/rare observations near a location."""
        return await dispatch("get_nearby_notable_observations", endpoints.nearby_notable_observations(
            lat, lng, back=back, detail=detail, dist=dist, hotspot=hotspot,
            max_results=max_results, spp_locale=spp_locale,
        ))

    @mcp.tool()
    async def get_historic_observations(
        region_code: RegionCode,
        year: HistoricYear,
        month: Month,
        day: Day,
        cat: Category = None,
        detail: Detail = "simple",
        hotspot: Hotspot = False,
        include_provisional: IncludeProvisional = False,
        max_results: MaxObservations = None,
        rank: Rank = "mrec",
        spp_locale: SppLocale = "en",
    ) -> str:
        """Get observations from a specific date in history."""
        return await dispatch("get_historic_observations", endpoints.historic_observations(
            region_code, year, month, day, cat=cat, detail=detail,
            hotspot=hotspot, include_provisional=include_provisional,
            max_results=max_results, rank=rank, spp_locale=spp_locale,
        ))

    # =========================================================================
    # PRODUCTS
    # =========================================================================

    @mcp.tool()
    async def get_top_100(
        region_code: RegionCode,
        year: HistoricYear,
        month: Month,
        day: Day,
        ranked_by: RankedBy = "spp",
        max_results: MaxTop100 = None,
    ) -> str:
        """Get the top 100 contributors on a given date."""
        return await dispatch("get_top_100", endpoints.top_100(
            region_code, year, month, day, ranked_by=ranked_by, max_results=max_results,
        ))

    @mcp.tool()
    async def get_recent_checklists(
        region_code: RegionCode,
        max_results: MaxChecklists = 10,
    ) -> str:
        """Get the most recently submitted checklists for a region."""
        return await dispatch("get_recent_checklists", endpoints.recent_checklists(
            region_code, max_results=max_results,
        ))

    @mcp.tool()
    async def get_checklists_on_date(
        region_code: RegionCode,
        year: Year,
        month: Month,
        day: Day,
        sort_key: SortKey = "obs_dt",
        max_results: MaxChecklists = 10,
    ) -> str:
        """Get checklists submitted on a specific date."""
        return await dispatch("get_checklists_on_date", endpoints.checklists_on_date(
            region_code, year, month, day, sort_key=sort_key, max_results=max_results,
        ))

    @mcp.tool()
    async def get_regional_statistics(
        region_code: RegionCode,
        year: Year,
        month: Month,
        day: Day,
    ) -> str:
        """Get statistics for a region on a specific date (checklist count, species count, contributor count)."""
        return await dispatch("get_regional_statistics", endpoints.regional_statistics(
            region_code, year, month, day,
        ))

    @mcp.tool()
    async def get_species_list(region_code: RegionCode) -> str:
        """Get all species ever recorded in a region (species codes in taxonomic order)."""
        return await dispatch("get_species_list", endpoints.species_list(region_code))

    @mcp.tool()
    async def get_checklist(sub_id: SubId) -> str:
        """Get details of a specific checklist including all observations."""
        return await dispatch("get_checklist", endpoints.checklist(sub_id))

    # =========================================================================
    # REFERENCE: GEOGRAPHY & HOTSPOTS
    # =========================================================================

    @mcp.tool()
    async def get_adjacent_regions(region_code: RegionCode) -> str:
        """Get regions that share a border with the specified region."""
        return await dispatch("get_adjacent_regions", endpoints.adjacent_regions(region_code))

    @mcp.tool()
    async def get_hotspots_in_region(
        region_code: RegionCode,
        back: OptionalDaysBack = None,
        fmt: Fmt = "json",
    ) -> str:
        """Get birding hotspots in a region."""
        return await dispatch("get_hotspots_in_region", endpoints.hotspots_in_region(
            region_code, back=back, fmt=fmt,
        ))

    @mcp.tool()
    async def get_nearby_hotspots(
        lat: Latitude,
        lng: Longitude,
        back: OptionalDaysBack = None,
        dist: HotspotDistance = 25,
        fmt: Fmt = "json",
    ) -> str:
        """Get birding hotspots near a location."""
        return await dispatch("get_nearby_hotspots", endpoints.nearby_hotspots(
            lat, lng, back=back, dist=dist, fmt=fmt,
        ))

    @mcp.tool()
    async def get_hotspot_info(loc_id: LocId) -> str:
        """Get information about a specific hotspot."""
        return await dispatch("get_hotspot_info", endpoints.hotspot_info(loc_id))

    # =========================================================================
    # REFERENCE: TAXONOMY
    # =========================================================================

    @mcp.tool()
    async def get_taxonomy(
        cat: Category = None,
        fmt: Fmt = "json",
        locale: SppLocale = "en",
        species: TaxonomySpecies = None,
        version: TaxonomyVersion = None,
    ) -> str:
        """Get the eBird taxonomy (list of all species with codes, names, and classification)."""
        return await dispatch("get_taxonomy", endpoints.taxonomy(
            cat=cat, fmt=fmt, locale=locale, species=species, version=version,
        ))

    @mcp.tool()
    async def get_taxonomic_forms(species_code: SpeciesCode) -> str:
        """Get subspecies/forms for a species."""
        return await dispatch("get_taxonomic_forms", endpoints.taxonomic_forms(species_code))

    @mcp.tool()
    async def get_taxa_locales() -> str:
        """Get available language codes for species names."""
        return await dispatch("get_taxa_locales", endpoints.taxa_locales())

    @mcp.tool()
    async def get_taxonomy_versions() -> str:
        """Get all available taxonomy versions."""
        return await dispatch("get_taxonomy_versions", endpoints.taxonomy_versions())

    @mcp.tool()
    async def get_taxonomic_groups(
        species_grouping: SpeciesGrouping = "ebird",
        group_name_locale: GroupNameLocale = "en",
    ) -> str:
        """Get species groups (e.g., 'Waterfowl', 'Raptors')."""
        return await dispatch("get_taxonomic_groups", endpoints.taxonomic_groups(
            species_grouping=species_grouping, group_name_locale=group_name_locale,
        ))

    # =========================================================================
    # REFERENCE: REGION
    # =========================================================================

    @mcp.tool()
    async def get_region_info(
        region_code: RegionCode,
        region_name_format: RegionNameFormat = "full",
        delim: Delim = ", ",
    ) -> str:
        """Get information about a region including name, bounds, and parent hierarchy."""
        return await dispatch("get_region_info", endpoints.region_info(
            region_code, region_name_format=region_name_format, delim=delim,
        ))

    @mcp.tool()
    async def get_sub_regions(
        region_type: RegionType,
        parent_region_code: ParentRegionCode,
        fmt: Fmt = "json",
    ) -> str:
        """Get sub-regions within a parent region. Examples: get_sub_regions('country', 'world') for all countries, get_sub_regions('subnational1', 'US') for US states."""
        return await dispatch("get_sub_regions", endpoints.sub_regions(
            region_type, parent_region_code, fmt=fmt,
        ))

    return mcp


# =============================================================================
# Server entry point
# =============================================================================
# The credential is checked BEFORE any tool is registered.  Without it no
# tool can work, so the process exits with status 1 and a diagnostic on
# stderr instead of advertising tools that will all fail.
# =============================================================================
def main() -> None:
    load_dotenv()
    try:
        settings = load_settings()
    except StartupConfigurationError as exc:
        configure_logging()
        logger.error(f"Error: {exc}")
        sys.exit(1)

    configure_logging(settings.log_level)
    logger.info(f"Starting eBird MCP server against {settings.base_url}")
    server = create_server(EBirdClient(settings))
    server.run()   # stdio transport by default


if __name__ == "__main__":
    main()
