"""
The MODEL layer contains pure data structures and the regression logic.
It has NO knowledge of the rendering layer; Qt is used only for signals.
"""
