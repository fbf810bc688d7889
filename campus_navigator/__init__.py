"""Campus Navigator - Find your way around a university campus.

An interactive campus map featuring:
- A shared catalog of campus locations, filtered by category, text and frequency
- Live walking distances from a one-shot position reading
- Personal custom markers stored next to the catalog
- State machine-based UI for camera focus and the add-marker dialog

Modules:
    core: Pure logic (distances, filtering, proximity, loading, location)
    data: Remote data store boundary (Supabase PostgREST over aiohttp)
    model: Data structures (PointOfInterest, CustomMarker, FilterCriteria, messages)
    ui: Streamlit interface components (state machines, renderers, sidebar)

Example:
    from campus_navigator.core import CatalogStore, compute_visible_items
    from campus_navigator.data import SupabaseCampusStore
    from campus_navigator.model import FilterCriteria
"""
