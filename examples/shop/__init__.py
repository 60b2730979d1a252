"""Example shop panel: customers, orders and a dashboard."""
