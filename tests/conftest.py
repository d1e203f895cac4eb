import matplotlib

# Never open a window while testing the drawing code.
matplotlib.use("Agg")
