import pytest

from logo_gallery.catalog.parse import parse_catalog
from logo_gallery.catalog.source import DEFAULT_CATALOG

BARCELONA = "BarcelonaArchives|Blue|www.arxiu.barcelona|Serif|1922.png"
CATALUNYA = "CatalunyaRadio|Red|www.ccma.cat|SansSerif|1983.png"


@pytest.fixture
def records():
    return parse_catalog(DEFAULT_CATALOG)


@pytest.fixture
def wide_catalog():
    return parse_catalog(
        [
            BARCELONA,
            CATALUNYA,
            "MuseuPicasso|Black|museupicasso.bcn.cat|Serif|1963.svg",
            "",
            "FCBarcelona|Red|www.fcbarcelona.com|SansSerif|1929.png",
            "ElPeriodico|White|www.elperiodico.com|Sans-Serif|1978.png",
        ]
    )
