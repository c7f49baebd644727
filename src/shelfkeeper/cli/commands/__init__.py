# ABOUTME: Subcommands registered on the shelfkeeper CLI group.
# ABOUTME: Each module defines one Click command.
