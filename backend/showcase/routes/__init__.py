# Routes package init
"""
Showcase Backend - API Routes Package
=======================================

Route Inventory:
    - artworks.py:   artwork CRUD, search, likes, per-artist views
    - favorites.py:  favorites add / list-with-artwork / remove
    - health.py:     GET /, GET /health

Routes stay thin: read the request, call a service, return its result.
"""
