from expense_intake.database.connection import get_connection


class HouseholdRepository:
    """Queries over household membership."""

    def get_active_member_ids(self, household_id: str) -> list[str]:
        """Return user ids of active members of a household."""
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    SELECT user_id
                    FROM household_members
                    WHERE household_id = %s AND status = 'active'
                    ORDER BY user_id
                    """,
                    (household_id,),
                )
                rows = cur.fetchall()
        return [str(row[0]) for row in rows]
