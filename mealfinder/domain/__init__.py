"""Describes the MealFinder domain. Centres around the `SearchView`.

Everything interesting lives on the other side of an http call:

- The search page only knows a base url and an envelope shape.
- The meal api only knows TheMealDB and its twenty numbered ingredient slots.

So the domain is mostly about folding whatever comes back into one of four
states and never getting stuck in the middle one.
"""
