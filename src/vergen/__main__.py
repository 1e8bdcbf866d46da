from vergen.cli import app

if __name__ == "__main__":
    app(prog_name="vergen")
