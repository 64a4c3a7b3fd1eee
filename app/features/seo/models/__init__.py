"""
SEO models package.
"""
from app.features.seo.models.seo_scan import SEOScan

__all__ = ["SEOScan"]
