"""Pure page-layout computation for tag index pages."""
