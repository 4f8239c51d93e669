import psycopg

from expense_intake.database.repositories.category_repository import CategoryRepository
from expense_intake.expenses.exceptions import CategoryHierarchyError
from expense_intake.logging.logger import Log


class CategoryHierarchyService:
    """Builds the household category taxonomy used as AI prompt context."""

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def get_category_hierarchy(self, household_id: str) -> dict[str, list[str]]:
        """Return category -> subcategories for a household.

        Always read from the repository; the taxonomy is never cached.

        Raises:
            CategoryHierarchyError: if the categories cannot be loaded.
        """
        try:
            tree = self._category_repo.get_category_tree(household_id)
        except psycopg.Error as exc:
            Log.error(f"Failed to load categories for household {household_id}: {exc}")
            raise CategoryHierarchyError(
                f"Error fetching categories for household {household_id}"
            ) from exc
        Log.info(f"Loaded {len(tree)} categories for household {household_id}")
        return tree

    def get_categories_and_subcategories(self, household_id: str) -> str:
        """Format the taxonomy as one ``- Category: Sub, Sub`` line per category."""
        tree = self.get_category_hierarchy(household_id)
        return "\n".join(
            f"- {category}: {', '.join(subcategories)}"
            for category, subcategories in tree.items()
        )
