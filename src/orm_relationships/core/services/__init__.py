"""Services shared by the examples, the CLI and the tests."""
