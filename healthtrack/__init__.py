"""healthtrack — health scoring, trends and insights over daily logs."""
