"""Frame scheduling and the controller that drives one clock."""
