"""Host adapters feeding pointer input into selection trackers."""
