"""
Restaurant catalog.

Responsibilities:
- Define the restaurant document schema and its fixed vocabularies.
- Hold restaurant documents in memory with a DataFrame view for querying.
- Compose filter parameters into a single query, then sort and paginate.
- Answer geospatial "nearby" searches.
"""
