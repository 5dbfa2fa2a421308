"""StayDB: normalized relational schema for a short-term rental marketplace."""
