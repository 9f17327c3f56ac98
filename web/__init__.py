"""
Web application package for the FEN diagram renderer.

Provides a FastAPI app serving PNG chessboard diagrams at GET /diagram.
Run with: uvicorn web.app:app --port 3000
"""
