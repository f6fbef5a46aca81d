# Services package init
"""
Showcase Backend - Services Layer
===================================

Service Inventory:
    - ArtworkService:   artwork documents (adds collection)
    - FavoriteService:  favorites collection and the artwork join

Services receive the DocumentStore per call and never hold it.
"""
