"""Line splitting shared by the document model and the diff engine"""


def split_lines(text: str) -> list[str]:
    """Split text on '\\n' into lines. Empty text is zero lines; a trailing newline keeps a trailing ''."""
    if text == "":
        return []
    return text.split("\n")
