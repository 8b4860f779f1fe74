# =============================================================================
# tools/params.py  —  Reusable Parameter Types for the eBird Tools
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Declares every argument type the tools accept, ONCE, as an Annotated type
#   carrying pydantic Field constraints and a description.
#
# WHY ANNOTATED TYPES?
#   FastMCP builds each tool's JSON schema from its Python signature.  The
#   constraints here (ge/le ranges, Literal enums) end up in that schema, so:
#     a) The host sees them during tool discovery
#     b) FastMCP rejects bad arguments BEFORE the handler runs, which means a
#        rejected call never reaches the network
#
# OPTIONAL NUMBERS:
#   Optional[Annotated[int, Field(...)]] puts the range on the int itself, so
#   None stays valid while 0 or 10001 do not.
#
# STRICT INTS AND BOOLS:
#   strict=True stops pydantic from turning True into 1 or "7" into 7.
#   Floats stay lax so a whole-number latitude like 40 is still accepted.
# =============================================================================

from typing import Annotated, Literal, Optional

from pydantic import Field

# --- Locations & identifiers ---
RegionCode = Annotated[
    str,
    Field(description="Country, subnational1, subnational2, or location code "
                      "(e.g., 'US', 'US-NY', 'US-NY-109', 'L99381')"),
]
SpeciesCode = Annotated[
    str,
    Field(description="eBird species code (e.g., 'cangoo' for Canada Goose, "
                      "'barswa' for Barn Swallow)"),
]
Latitude = Annotated[float, Field(ge=-90, le=90, description="Latitude")]
Longitude = Annotated[float, Field(ge=-180, le=180, description="Longitude")]
SubId = Annotated[str, Field(description="The checklist identifier (e.g., 'S29893687')")]
LocId = Annotated[str, Field(description="The location code (e.g., 'L99381')")]
ParentRegionCode = Annotated[
    str,
    Field(description="Parent region code, or 'world' for countries"),
]

# --- Dates ---
HistoricYear = Annotated[int, Field(strict=True, ge=1800, description="Year")]
Year = Annotated[int, Field(strict=True, description="Year")]
Month = Annotated[int, Field(strict=True, ge=1, le=12, description="Month")]
Day = Annotated[int, Field(strict=True, ge=1, le=31, description="Day of month")]

# --- Windows & caps ---
DaysBack = Annotated[int, Field(strict=True, ge=1, le=30, description="Number of days back to fetch (1-30)")]
OptionalDaysBack = Annotated[
    Optional[Annotated[int, Field(strict=True, ge=1, le=30)]],
    Field(description="Only hotspots visited in last N days"),
]
ObsDistance = Annotated[float, Field(ge=0, le=50, description="Search radius in kilometers")]
OptionalObsDistance = Annotated[
    Optional[Annotated[float, Field(ge=0, le=50)]],
    Field(description="Maximum distance in km"),
]
HotspotDistance = Annotated[float, Field(ge=0, le=500, description="Search radius in kilometers")]
MaxObservations = Annotated[
    Optional[Annotated[int, Field(strict=True, ge=1, le=10000)]],
    Field(description="Maximum observations to return"),
]
MaxNearest = Annotated[int, Field(strict=True, ge=1, le=3000, description="Maximum observations to return")]
MaxTop100 = Annotated[
    Optional[Annotated[int, Field(strict=True, ge=1, le=100)]],
    Field(description="Limit results"),
]
MaxChecklists = Annotated[int, Field(strict=True, ge=1, le=200, description="Number of checklists to return")]

# --- Flags & free-text filters ---
Hotspot = Annotated[bool, Field(strict=True, description="Only fetch from hotspots")]
IncludeProvisional = Annotated[bool, Field(strict=True, description="Include unreviewed observations")]
Category = Annotated[
    Optional[str],
    Field(description="Taxonomic category filter (e.g., 'species', 'issf', 'hybrid')"),
]
SppLocale = Annotated[str, Field(description="Language for common names")]
GroupNameLocale = Annotated[str, Field(description="Language for group names")]
Delim = Annotated[str, Field(description="Delimiter for name elements")]
TaxonomySpecies = Annotated[
    Optional[str],
    Field(description="Comma-separated species codes to fetch (e.g., 'cangoo,barswa')"),
]
TaxonomyVersion = Annotated[Optional[str], Field(description="Specific taxonomy version")]

# --- Enumerations ---
Detail = Annotated[Literal["simple", "full"], Field(description="Level of detail in response")]
Sort = Annotated[Literal["date", "species"], Field(description="Sort by date or species")]
Rank = Annotated[
    Literal["mrec", "create"],
    Field(description="'mrec' for latest, 'create' for first added"),
]
RankedBy = Annotated[
    Literal["spp", "cl"],
    Field(description="'spp' for species count, 'cl' for checklist count"),
]
SortKey = Annotated[
    Literal["obs_dt", "creation_dt"],
    Field(description="Sort by observation or submission date"),
]
Fmt = Annotated[Literal["json", "csv"], Field(description="Response format")]
SpeciesGrouping = Annotated[
    Literal["ebird", "merlin"],
    Field(description="'ebird' for taxonomic order, 'merlin' for similar birds grouped"),
]
RegionNameFormat = Annotated[
    Literal["detailed", "detailednoqual", "full", "namequal", "nameonly", "revdetailed"],
    Field(description="Name format"),
]
RegionType = Annotated[
    Literal["country", "subnational1", "subnational2"],
    Field(description="Type of sub-regions"),
]
