"""Host adapters converting between motion positions and UI widgets."""
