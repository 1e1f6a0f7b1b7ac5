from ansipix.model import RGB, Sample

ESC = "\033"
RESET = f"{ESC}[0m"
CLEAR = f"{ESC}[H{ESC}[2J"

# Densest glyph first; a brightness strictly greater than the threshold selects the glyph
GLYPH_THRESHOLDS = (
    (230, "#"),
    (207, "&"),
    (184, "$"),
    (161, "X"),
    (138, "x"),
    (115, "="),
    (92, "+"),
    (69, ";"),
    (46, ":"),
    (23, "."),
)
BLANK = " "


def glyph_for(brightness: int) -> str:
    for threshold, glyph in GLYPH_THRESHOLDS:
        if brightness > threshold:
            return glyph
    return BLANK


def background_escape(rgb: RGB) -> str:
    r, g, b = rgb
    return f"{ESC}[48;2;{r};{g};{b}m"


def foreground_escape(rgb: RGB) -> str:
    r, g, b = rgb
    return f"{ESC}[38;2;{r};{g};{b}m"


def render_cell(sample: Sample, background: RGB) -> str:
    """Background escape, foreground escape and brightness glyph for one cell."""
    return background_escape(background) + foreground_escape(sample.rgb) + glyph_for(sample.brightness)
