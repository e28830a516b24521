"""
The CORE layer contains the geometry of the Hopf fibration and the camera.
It has NO knowledge of the GUI (Qt).
It deals with fibers in 4-space, their projections to 3-space and the
perspective mapping onto the screen.
"""
