"""Routing — ordered, first-match-wins route list.

Routes are registered during setup, compiled once into ``Route`` objects
and tried in registration order on every request.
"""
