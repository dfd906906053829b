from quick_check.cli import run

if __name__ == "__main__":
    run()
