from psycopg.rows import dict_row

from expense_intake.database.connection import get_connection


class CategoryRepository:
    """Read-only queries over the categories and subcategories tables."""

    def get_category_tree(self, household_id: str) -> dict[str, list[str]]:
        """Return category name -> subcategory names for one household.

        Categories without subcategories map to an empty list. Both levels
        are ordered by name.
        """
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT c.name AS category, s.name AS subcategory
                    FROM categories c
                    LEFT JOIN subcategories s
                           ON s.category_id = c.id
                          AND s.household_id = c.household_id
                    WHERE c.household_id = %s
                    ORDER BY c.name, s.name
                    """,
                    (household_id,),
                )
                rows = cur.fetchall()

        tree: dict[str, list[str]] = {}
        for row in rows:
            subs = tree.setdefault(row["category"], [])
            if row["subcategory"] is not None:
                subs.append(row["subcategory"])
        return tree
