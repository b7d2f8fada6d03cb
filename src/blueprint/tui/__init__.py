"""Terminal interview: capability detection, inline menus and prompts."""
