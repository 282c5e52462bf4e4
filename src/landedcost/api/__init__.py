"""HTTP surface for landed-cost estimates."""
