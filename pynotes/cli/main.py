from .commands import app

def main():
    app(prog_name="pynotes")

if __name__ == "__main__":
    main()
