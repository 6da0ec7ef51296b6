"""
Desktop front end for Minesweeper
Import desktop.gui for the tkinter window and desktop.cli for the launcher
"""
