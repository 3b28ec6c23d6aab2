from potential_grid.cli import app

if __name__ == "__main__":
    app()
