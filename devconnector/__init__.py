"""DevConnector profile API."""
