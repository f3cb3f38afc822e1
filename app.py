from one_path.app.main import main

if __name__ == "__main__":
    main()
