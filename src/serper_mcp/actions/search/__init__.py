from .search import search_handler
