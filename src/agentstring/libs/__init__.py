"""Supporting libraries used alongside the user agent core."""
