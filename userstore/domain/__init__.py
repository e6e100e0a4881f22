"""Domain types: user records and the commands that act on them."""
