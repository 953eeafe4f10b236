"""Feature packages: calendar, filesystem and numerals."""
