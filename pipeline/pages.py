"""Page identifiers the assistant can point users towards."""

PHARMACIES_PAGE = "pharmacies.html"
HOTLINES_PAGE = "hotlines.html"
BODY_SECTIONS_PAGE = "body-sections.html"
SPECIALISTS_PAGE = "specialists.html"

ALL_PAGES = (
    PHARMACIES_PAGE,
    HOTLINES_PAGE,
    BODY_SECTIONS_PAGE,
    SPECIALISTS_PAGE,
)

# General health-topic pages attached to every knowledge-base answer.
DEFAULT_HEALTH_PAGES = (BODY_SECTIONS_PAGE, SPECIALISTS_PAGE)
