"""
Utility functions for safe console output on VPS with latin-1 encoding
"""

def safe_print(msg):
    """
    Print to console with fallback for unicode encoding errors.
    Needed because suit symbols can't be encoded on latin-1 consoles.
    """
    try:
        print(msg)
    except UnicodeEncodeError:
        # Fallback: replace non-ASCII characters with '?'
        safe_msg = msg.encode('ascii', errors='replace').decode('ascii')
        print(safe_msg)


def log(tag, msg):
    """Print a tagged console line, e.g. log("ENGINE", "Round started")"""
    safe_print(f"[{tag}] {msg}")
