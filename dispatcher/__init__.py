"""Emergency dispatcher: record, categorize and update incidents in a flat file."""
