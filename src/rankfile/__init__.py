"""rankfile: chess positions, move rules and move notation."""
