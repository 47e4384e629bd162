from collections.abc import Callable
from datetime import date

# Returns the current calendar date; use cases take one so tests can pin "today".
Clock = Callable[[], date]
