"""GitHub Label Finder.

Searches GitHub issues by one or more labels and ranks the repositories
that own the matching issues:
- Comma-separated labels become a ``label:a+label:b`` search query
- Up to 100 matching issues are grouped by repository
- Repositories are ranked by match count and shown ten per page
"""

__version__ = "1.0.0"
