from jinja2 import Environment

from mealfinder.domain.models import Meal
from mealfinder.domain.search_view import SearchView


class SearchPage:
    def __init__(
        self,
        view: SearchView,
        *,
        environment: Environment,
        template_name: str = "index.html",
        results_template_name: str = "search-results.html",
    ) -> None:
        self.view = view
        self.env = environment
        self.name = template_name
        self.results_name = results_template_name

    @property
    def title(self) -> str:
        return "MealDB App"

    @property
    def query(self) -> str:
        return self.view.query

    @property
    def error(self) -> str:
        return self.view.error

    @property
    def loading(self) -> bool:
        return self.view.loading

    @property
    def meals(self) -> tuple[Meal, ...]:
        return self.view.meals

    def render(self) -> str:
        return self.env.get_template(self.name).render(page=self)

    def render_results(self) -> str:
        return self.env.get_template(self.results_name).render(page=self)
