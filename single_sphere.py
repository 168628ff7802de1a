from cli import render

# Same scene as `python cli.py -f sphere.ppm`, at a quicker preview size.
render(200, "sphere.ppm")
