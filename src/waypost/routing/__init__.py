"""Routing — pattern compilation, first-match resolution and argument merging.

Routes and tokens are registered during setup; every match compiles the
candidate patterns against the current token table.
"""
