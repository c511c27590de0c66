"""Central CSS definitions for the commands explorer."""

# Common UI patterns shared across components
COMMON_CSS = """
/* Section titles - small, muted */
.section-title {
    color: $text-muted;
    text-style: bold;
    margin-top: 1;
}

/* Empty list placeholder */
.empty-list {
    color: $text-disabled;
    padding: 2;
    text-align: center;
}
"""

# Filter chips - toggled categories light up
CHIP_CSS = """
CategoryChip {
    min-width: 8;
    height: 3;
    margin: 0 1 0 0;
    border: round $surface-lighten-1;
    background: $surface;
    color: $text-muted;
}

CategoryChip.-active {
    border: round $accent;
    background: $accent;
    color: $text;
}

.tag {
    width: auto;
    padding: 0 1;
    margin-right: 1;
    background: $surface-lighten-1;
    color: $text-muted;
}
"""

# Command cards
CARD_CSS = """
CommandCard {
    height: auto;
    padding: 1 2;
    margin-bottom: 1;
    background: $surface;
    border: round $surface-lighten-1;
}

CommandCard .card-header, CommandCard .usage-row {
    height: auto;
}

CommandCard .card-title {
    text-style: bold;
    width: auto;
    margin-right: 2;
}

CommandCard .usage {
    width: 1fr;
    padding: 0 1;
    background: $panel;
}

CommandCard .meta {
    color: $text-muted;
}
"""

# Combined base CSS for import
BASE_CSS = COMMON_CSS + CHIP_CSS + CARD_CSS
