"""
backend/app/config_competitions.py

Purpose:
    Static competition catalog for the match feed: global popularity rank,
    significance tier, recurring in-season periods and provider identifiers,
    plus the provider league priority list used to order and tier the feed.
    Raw definitions only; app.services.competition_catalog_service validates
    them into an immutable CompetitionCatalog at startup.
"""

# Aug -> May, the common European club season.
_EURO_SEASON = [{"start": {"month": 8}, "end": {"month": 5}}]
_CONTINENTAL_CLUB = [
    {"start": {"month": 9}, "end": {"month": 12}},
    {"start": {"month": 2}, "end": {"month": 5}},
]
_INTL_WINDOWS = [
    {"start": {"month": 6}, "end": {"month": 6}},
    {"start": {"month": 9}, "end": {"month": 9}},
    {"start": {"month": 10}, "end": {"month": 10}},
    {"start": {"month": 11}, "end": {"month": 11}},
]

# Year-round leagues always usable when nothing top-tier is in season.
# Qualifiers are fallback candidates by type.
FALLBACK_COMPETITION_IDS: frozenset[str] = frozenset({
    "major-league-soccer",
    "copa-libertadores",
    "argentine-primera",
    "brazilian-serie-a",
    "liga-mx",
})

# Feed priority by provider league id, highest first. The tier here overrides
# the catalog tier when scoring; a repeated id keeps its first entry.
LEAGUE_PRIORITIES: list[dict] = [
    # Tier 1: top five leagues
    {"external_id": "33973", "name": "Premier League", "tier": 1},
    {"external_id": "119924", "name": "La Liga", "tier": 1},
    {"external_id": "115669", "name": "Serie A", "tier": 1},
    {"external_id": "67162", "name": "Bundesliga", "tier": 1},
    {"external_id": "52695", "name": "Ligue 1", "tier": 1},
    # Tier 2: european club competitions
    {"external_id": "2486", "name": "UEFA Champions League", "tier": 2},
    {"external_id": "3337", "name": "UEFA Europa League", "tier": 2},
    # Tier 3: secondary leagues
    {"external_id": "34824", "name": "Championship", "tier": 3},
    {"external_id": "80778", "name": "Liga Portugal", "tier": 3},
    {"external_id": "75672", "name": "Eredivisie", "tier": 3},
    {"external_id": "11847", "name": "Copa Libertadores", "tier": 3},
    # Tier 4: other notable leagues
    {"external_id": "109712", "name": "Liga Profesional Argentina", "tier": 4},
    {"external_id": "223746", "name": "Liga MX", "tier": 4},
    {"external_id": "173537", "name": "Turkish Super Lig", "tier": 4},
    {"external_id": "216087", "name": "MLS", "tier": 4},
]

COMPETITIONS: list[dict] = [
    # Tier 1: global giants
    {
        "id": "fifa-world-cup", "rank": 1, "tier": 1, "name": "FIFA World Cup",
        "short_name": "World Cup", "competition_type": "tournament", "region": "Global",
        "active_periods": [{"start": {"month": 11, "day": 20}, "end": {"month": 12, "day": 18}}],
    },
    {
        "id": "uefa-champions-league", "rank": 2, "tier": 1, "name": "UEFA Champions League",
        "short_name": "Champions League", "competition_type": "continental", "region": "Europe",
        "external_id": "2486",
        "active_periods": _CONTINENTAL_CLUB,
    },
    {
        "id": "english-premier-league", "rank": 3, "tier": 1, "name": "English Premier League",
        "short_name": "Premier League", "competition_type": "league", "region": "Europe",
        "country": "England", "external_id": "33973",
        "active_periods": _EURO_SEASON,
    },
    {
        "id": "uefa-euro", "rank": 4, "tier": 1, "name": "UEFA European Championship",
        "short_name": "Euro", "competition_type": "tournament", "region": "Europe",
        "active_periods": [{"start": {"month": 6, "day": 14}, "end": {"month": 7, "day": 14}}],
    },
    {
        "id": "spanish-la-liga", "rank": 5, "tier": 1, "name": "Spanish La Liga",
        "short_name": "La Liga", "competition_type": "league", "region": "Europe",
        "country": "Spain", "external_id": "119924",
        "active_periods": _EURO_SEASON,
    },
    {
        "id": "italian-serie-a", "rank": 6, "tier": 1, "name": "Italian Serie A",
        "short_name": "Serie A", "competition_type": "league", "region": "Europe",
        "country": "Italy", "external_id": "115669",
        "active_periods": _EURO_SEASON,
    },
    {
        "id": "german-bundesliga", "rank": 7, "tier": 1, "name": "German Bundesliga",
        "short_name": "Bundesliga", "competition_type": "league", "region": "Europe",
        "country": "Germany", "external_id": "67162",
        "active_periods": _EURO_SEASON,
    },
    {
        "id": "copa-america", "rank": 8, "tier": 1, "name": "Copa America",
        "short_name": "Copa America", "competition_type": "tournament", "region": "South America",
        "active_periods": [{"start": {"month": 6, "day": 20}, "end": {"month": 7, "day": 14}}],
    },
    {
        "id": "french-ligue-1", "rank": 9, "tier": 1, "name": "French Ligue 1",
        "short_name": "Ligue 1", "competition_type": "league", "region": "Europe",
        "country": "France", "external_id": "52695",
        "active_periods": _EURO_SEASON,
    },
    {
        "id": "fifa-club-world-cup", "rank": 10, "tier": 1, "name": "FIFA Club World Cup",
        "short_name": "Club World Cup", "competition_type": "tournament", "region": "Global",
        "active_periods": [{"start": {"month": 6, "day": 15}, "end": {"month": 7, "day": 13}}],
    },
    # Tier 2: highly popular tournaments and leagues
    {
        "id": "uefa-europa-league", "rank": 11, "tier": 2, "name": "UEFA Europa League",
        "short_name": "Europa League", "competition_type": "continental", "region": "Europe",
        "external_id": "3337",
        "active_periods": _CONTINENTAL_CLUB,
    },
    {
        "id": "copa-libertadores", "rank": 12, "tier": 2, "name": "Copa Libertadores",
        "short_name": "Libertadores", "competition_type": "continental", "region": "South America",
        "external_id": "11847",
        "active_periods": [{"start": {"month": 2}, "end": {"month": 11}}],
    },
    {
        "id": "uefa-conference-league", "rank": 13, "tier": 2, "name": "UEFA Conference League",
        "short_name": "Conference League", "competition_type": "continental", "region": "Europe",
        "active_periods": _CONTINENTAL_CLUB,
    },
    {
        "id": "fa-cup", "rank": 14, "tier": 2, "name": "FA Cup",
        "short_name": "FA Cup", "competition_type": "cup", "region": "Europe",
        "country": "England",
        "active_periods": _EURO_SEASON,
    },
    {
        "id": "wc-qual-uefa", "rank": 15, "tier": 2, "name": "World Cup Qualifiers UEFA",
        "short_name": "WCQ Europe", "competition_type": "qualifier", "region": "Europe",
        "active_periods": [
            {"start": {"month": 3}, "end": {"month": 3}},
            {"start": {"month": 9}, "end": {"month": 11}},
        ],
    },
    {
        "id": "wc-qual-conmebol", "rank": 16, "tier": 2, "name": "World Cup Qualifiers CONMEBOL",
        "short_name": "WCQ South America", "competition_type": "qualifier", "region": "South America",
        "active_periods": _INTL_WINDOWS,
    },
    {
        "id": "major-league-soccer", "rank": 17, "tier": 2, "name": "Major League Soccer",
        "short_name": "MLS", "competition_type": "league", "region": "North America",
        "country": "USA", "external_id": "216087",
        "active_periods": [{"start": {"month": 2}, "end": {"month": 11}}],
    },
    {
        "id": "argentine-primera", "rank": 18, "tier": 2, "name": "Liga Profesional Argentina",
        "short_name": "Primera Division", "competition_type": "league", "region": "South America",
        "country": "Argentina", "external_id": "109712",
        "active_periods": [{"start": {"month": 1}, "end": {"month": 12}}],
    },
    {
        "id": "brazilian-serie-a", "rank": 19, "tier": 2, "name": "Brasileirao Serie A",
        "short_name": "Brasileirao", "competition_type": "league", "region": "South America",
        "country": "Brazil",
        "active_periods": [{"start": {"month": 4}, "end": {"month": 12}}],
    },
    {
        "id": "liga-mx", "rank": 20, "tier": 2, "name": "Liga MX",
        "short_name": "Liga MX", "competition_type": "league", "region": "North America",
        "country": "Mexico", "external_id": "223746",
        "active_periods": [{"start": {"month": 1}, "end": {"month": 12}}],
    },
    # Tier 3: strong regional draws
    {
        "id": "dfb-pokal", "rank": 21, "tier": 3, "name": "DFB-Pokal",
        "short_name": "DFB-Pokal", "competition_type": "cup", "region": "Europe",
        "country": "Germany",
        "active_periods": _EURO_SEASON,
    },
    {
        "id": "copa-del-rey", "rank": 22, "tier": 3, "name": "Copa del Rey",
        "short_name": "Copa del Rey", "competition_type": "cup", "region": "Europe",
        "country": "Spain",
        "active_periods": [{"start": {"month": 10}, "end": {"month": 4}}],
    },
    {
        "id": "saudi-pro-league", "rank": 23, "tier": 3, "name": "Saudi Pro League",
        "short_name": "Saudi Pro League", "competition_type": "league", "region": "Asia",
        "country": "Saudi Arabia",
        "active_periods": _EURO_SEASON,
    },
    {
        "id": "dutch-eredivisie", "rank": 24, "tier": 3, "name": "Dutch Eredivisie",
        "short_name": "Eredivisie", "competition_type": "league", "region": "Europe",
        "country": "Netherlands", "external_id": "75672",
        "active_periods": _EURO_SEASON,
    },
    {
        "id": "portuguese-primeira", "rank": 25, "tier": 3, "name": "Liga Portugal",
        "short_name": "Primeira Liga", "competition_type": "league", "region": "Europe",
        "country": "Portugal", "external_id": "80778",
        "active_periods": _EURO_SEASON,
    },
    {
        "id": "wc-qual-caf", "rank": 26, "tier": 3, "name": "World Cup Qualifiers CAF",
        "short_name": "WCQ Africa", "competition_type": "qualifier", "region": "Africa",
        "active_periods": _INTL_WINDOWS,
    },
    {
        "id": "wc-qual-afc", "rank": 27, "tier": 3, "name": "World Cup Qualifiers AFC",
        "short_name": "WCQ Asia", "competition_type": "qualifier", "region": "Asia",
        "active_periods": _INTL_WINDOWS,
    },
    {
        "id": "wc-qual-concacaf", "rank": 28, "tier": 3, "name": "World Cup Qualifiers CONCACAF",
        "short_name": "WCQ CONCACAF", "competition_type": "qualifier", "region": "North America",
        "active_periods": _INTL_WINDOWS,
    },
    {
        "id": "turkish-super-lig", "rank": 29, "tier": 3, "name": "Turkish Super Lig",
        "short_name": "Super Lig", "competition_type": "league", "region": "Europe",
        "country": "Turkey", "external_id": "173537",
        "active_periods": _EURO_SEASON,
    },
    {
        "id": "scottish-premiership", "rank": 30, "tier": 3, "name": "Scottish Premiership",
        "short_name": "Premiership", "competition_type": "league", "region": "Europe",
        "country": "Scotland",
        "active_periods": [{"start": {"month": 7}, "end": {"month": 5}}],
    },
    # Tier 4: continental tournaments and secondary club competitions
    {
        "id": "afc-asian-cup", "rank": 31, "tier": 4, "name": "AFC Asian Cup",
        "short_name": "Asian Cup", "competition_type": "tournament", "region": "Asia",
        "active_periods": [{"start": {"month": 1}, "end": {"month": 2}}],
    },
    {
        "id": "afcon", "rank": 32, "tier": 4, "name": "Africa Cup of Nations",
        "short_name": "AFCON", "competition_type": "tournament", "region": "Africa",
        "active_periods": [{"start": {"month": 1}, "end": {"month": 2}}],
    },
    {
        "id": "concacaf-gold-cup", "rank": 33, "tier": 4, "name": "CONCACAF Gold Cup",
        "short_name": "Gold Cup", "competition_type": "tournament", "region": "North America",
        "active_periods": [{"start": {"month": 6}, "end": {"month": 7}}],
    },
    {
        "id": "uefa-nations-league", "rank": 34, "tier": 4, "name": "UEFA Nations League",
        "short_name": "Nations League", "competition_type": "tournament", "region": "Europe",
        "active_periods": _INTL_WINDOWS,
    },
    {
        "id": "copa-sudamericana", "rank": 35, "tier": 4, "name": "Copa Sudamericana",
        "short_name": "Sudamericana", "competition_type": "continental", "region": "South America",
        "active_periods": [{"start": {"month": 3}, "end": {"month": 11}}],
    },
    {
        "id": "concacaf-champions-cup", "rank": 36, "tier": 4, "name": "CONCACAF Champions Cup",
        "short_name": "Champions Cup", "competition_type": "continental", "region": "North America",
        "active_periods": [{"start": {"month": 2}, "end": {"month": 5}}],
    },
    {
        "id": "afc-champions-league", "rank": 37, "tier": 4, "name": "AFC Champions League",
        "short_name": "AFC CL", "competition_type": "continental", "region": "Asia",
        "active_periods": [{"start": {"month": 2}, "end": {"month": 11}}],
    },
    {
        "id": "caf-champions-league", "rank": 38, "tier": 4, "name": "CAF Champions League",
        "short_name": "CAF CL", "competition_type": "continental", "region": "Africa",
        "active_periods": [{"start": {"month": 2}, "end": {"month": 11}}],
    },
    # Untiered: scored with the default league weight
    {
        "id": "uefa-u21", "rank": 39, "name": "UEFA European Under-21 Championship",
        "short_name": "U21 Euro", "competition_type": "tournament", "region": "Europe",
        "active_periods": [{"start": {"month": 6}, "end": {"month": 7}}],
    },
    {
        "id": "olympic-football-men", "rank": 40, "name": "Olympic Football Tournament",
        "short_name": "Olympics", "competition_type": "tournament", "region": "Global",
        "active_periods": [{"start": {"month": 7}, "end": {"month": 8}}],
    },
    {
        "id": "fifa-u20-world-cup", "rank": 41, "name": "FIFA U-20 World Cup",
        "short_name": "U20 World Cup", "competition_type": "tournament", "region": "Global",
        "active_periods": [{"start": {"month": 5}, "end": {"month": 6}}],
    },
    {
        "id": "fifa-u17-world-cup", "rank": 42, "name": "FIFA U-17 World Cup",
        "short_name": "U17 World Cup", "competition_type": "tournament", "region": "Global",
        "active_periods": [{"start": {"month": 10}, "end": {"month": 11}}],
    },
    {
        "id": "indian-super-league", "rank": 43, "name": "Indian Super League",
        "short_name": "ISL", "competition_type": "league", "region": "Asia",
        "country": "India",
        "active_periods": [{"start": {"month": 10}, "end": {"month": 3}}],
    },
    {
        "id": "egyptian-premier", "rank": 44, "name": "Egyptian Premier League",
        "short_name": "Egyptian PL", "competition_type": "league", "region": "Africa",
        "country": "Egypt",
        "active_periods": [{"start": {"month": 10}, "end": {"month": 6}}],
    },
    {
        "id": "south-african-psl", "rank": 45, "name": "South African Premiership",
        "short_name": "PSL", "competition_type": "league", "region": "Africa",
        "country": "South Africa",
        "active_periods": _EURO_SEASON,
    },
    {
        "id": "belgian-pro-league", "rank": 46, "name": "Belgian Pro League",
        "short_name": "Pro League", "competition_type": "league", "region": "Europe",
        "country": "Belgium",
        "active_periods": [{"start": {"month": 7}, "end": {"month": 5}}],
    },
    {
        "id": "russian-premier", "rank": 47, "name": "Russian Premier League",
        "short_name": "Russian PL", "competition_type": "league", "region": "Europe",
        "country": "Russia",
        "active_periods": [{"start": {"month": 3}, "end": {"month": 12}}],
    },
    {
        "id": "uae-pro-league", "rank": 48, "name": "UAE Pro League",
        "short_name": "UAE Pro League", "competition_type": "league", "region": "Asia",
        "country": "UAE",
        "active_periods": [{"start": {"month": 9}, "end": {"month": 5}}],
    },
    {
        "id": "greek-super-league", "rank": 49, "name": "Greek Super League",
        "short_name": "Super League", "competition_type": "league", "region": "Europe",
        "country": "Greece",
        "active_periods": _EURO_SEASON,
    },
    {
        "id": "swiss-super-league", "rank": 50, "name": "Swiss Super League",
        "short_name": "Swiss SL", "competition_type": "league", "region": "Europe",
        "country": "Switzerland",
        "active_periods": [{"start": {"month": 7}, "end": {"month": 5}}],
    },
]
