"""
================================================================================
We.Retail Homepage Suite
================================================================================

Registers "We.Retail Tests - Homepage" at import time.

Case order is execution order: load, navbar, hero image, teasers, site
features, featured products (grid + first product), articles, new arrivals
(grid + first product), footer.

================================================================================
"""

from testsuites.ui_testing import weretail
from testsuites.ui_testing.framework import harness as h
from testsuites.ui_testing.framework.dom_query import DomQuery


SUITE_NAME = "We.Retail Tests - Homepage"
SUITE_PATH = "/apps/weretail/tests/homepage/HomepageSuite.js"

PRODUCT_GRID_CLASS = ".productgrid"

dom = DomQuery()

homepage_suite = (
    h.TestSuite(SUITE_NAME, path=SUITE_PATH, register=True)
    .add_test_case(weretail.homepage_load_test(h, dom))
    .add_test_case(weretail.navbar_test(h, dom, 5))
    .add_test_case(weretail.hero_image_test(h, dom))
    .add_test_case(weretail.teasers_test(h, dom, 6))
    .add_test_case(weretail.site_features_test(h, dom))
    # Featured products
    .add_test_case(weretail.products_grid_test(h, dom, PRODUCT_GRID_CLASS + ":first", 6))
    .add_test_case(weretail.product_test(h, dom, PRODUCT_GRID_CLASS + ":first .we-ProductsGrid-item:first"))
    .add_test_case(weretail.articles_test(h, dom, 6))
    # New arrivals
    .add_test_case(weretail.products_grid_test(h, dom, PRODUCT_GRID_CLASS + ":eq(1)", 6))
    .add_test_case(weretail.product_test(h, dom, PRODUCT_GRID_CLASS + ":eq(1) .we-ProductsGrid-item:first"))
    .add_test_case(weretail.footer_test(h, dom))
)
