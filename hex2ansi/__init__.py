"""hex2ansi — convert hex colour codes to xterm 256-colour escape sequences."""
