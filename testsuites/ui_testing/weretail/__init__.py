"""
================================================================================
We.Retail Test Cases
================================================================================

Factories for the page-level cases of the We.Retail storefront.

Every factory has the signature `(h, dom[, params]) -> TestCase`, where `h`
is the harness module and `dom` the DomQuery helper, and is shared by all
We.Retail suites through this namespace.

Author: Automation Team
License: MIT
================================================================================
"""

from .articles import articles_test
from .footer import footer_test
from .header import navbar_test
from .hero_image import hero_image_test
from .homepage import HOMEPAGE_URL, homepage_load_test
from .products import product_test, products_grid_test
from .site_features import site_features_test
from .teasers import teasers_test

__all__ = [
    "HOMEPAGE_URL",
    "articles_test",
    "footer_test",
    "hero_image_test",
    "homepage_load_test",
    "navbar_test",
    "product_test",
    "products_grid_test",
    "site_features_test",
    "teasers_test",
]
