"""
Interface package: command-line access to the diagram renderer.

Modules:
    cli - click commands to render a FEN to PNG or print the parsed board.
          Installed as the `fen-diagram` script; also runnable with
          python -m interface.cli
"""
