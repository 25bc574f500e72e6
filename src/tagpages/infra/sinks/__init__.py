"""Output sinks for generated tag pages."""

from tagpages.infra.sinks.site import SiteOutputSink, TagPageRenderer

__all__ = ["SiteOutputSink", "TagPageRenderer"]
