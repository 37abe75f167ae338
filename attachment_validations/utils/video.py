# attachment_validations/utils/video.py
import json
import subprocess
import tempfile

from .files import read_all

FFPROBE_COMMAND = [
    "ffprobe",
    "-v", "error",
    "-select_streams", "v:0",
    "-show_entries", "stream=width,height",
    "-of", "json",
]
FFPROBE_TIMEOUT = 30


def video_dimensions(django_file):
    """Size of the first video stream, read with ffprobe from a temporary copy."""
    with tempfile.NamedTemporaryFile() as tmp:
        tmp.write(read_all(django_file))
        tmp.flush()
        result = subprocess.run(
            [*FFPROBE_COMMAND, tmp.name],
            capture_output=True,
            check=True,
            timeout=FFPROBE_TIMEOUT,
        )
    streams = json.loads(result.stdout or b"{}").get("streams") or []
    if not streams:
        return None
    return int(streams[0]["width"]), int(streams[0]["height"])
