# viz/renderer_colors.py
BG = (0, 255, 0)      # background cleared every frame
BODY = (255, 0, 0)    # one square per snake cell
