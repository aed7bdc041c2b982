"""Search TheMealDB by meal name and show the meals with the fewest ingredients."""
