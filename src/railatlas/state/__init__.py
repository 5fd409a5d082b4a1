"""Temporal resolution layer.

This package is the single source of truth for how an entity's lifecycle
events and a query year combine into the state shown on the map.  Every
function here is pure over the loaded dataset.
"""
