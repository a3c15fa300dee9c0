from factorial_calculator.driver import main


if __name__ == '__main__':
    main()
