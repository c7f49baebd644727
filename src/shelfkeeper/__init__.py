# ABOUTME: shelfkeeper - an in-memory library catalog and circulation tracker.
# ABOUTME: The core lives in shelfkeeper.catalog; the console menu in shelfkeeper.cli.
