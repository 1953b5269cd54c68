"""Contact domain - contact form messages and newsletter signups."""
