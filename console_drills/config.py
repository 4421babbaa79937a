"""Configuration constants for Console Drills."""

# Temperature logger
DEFAULT_MIN_TEMP = -20.0
DEFAULT_MAX_TEMP = 130.0
DEFAULT_UNIT = "Fahrenheit"
QUIT_SENTINEL = "q"

# Multiplication table
DEFAULT_TABLE_SIZE = 10
CELL_WIDTH = 4
ROW_LABEL_WIDTH = 3
HEADER_LABEL = "    |"

# Yes/no prompts
YES_ANSWER = "y"

# Temperature logger messages
TEMP_PROMPT = "Enter a temperature ('q' to quit): "
INVALID_NUMBER_MSG = "Invalid number, please try again!"
OUT_OF_RANGE_MSG = "Temperature must be between {min} and {max} {unit}."
TOTAL_MSG = "Total temperatures entered: {count}"
AVERAGE_MSG = "Average temperature: {average:.2f}"

# Multiplication table messages
TABLE_TITLE = "Multiplication Table (1–10) :)"
CUSTOM_SIZE_PROMPT = "Would you like to set a custom table size? (y/n): "
MAX_NUMBER_PROMPT = "Enter the maximum number for the table: "
INVALID_SIZE_MSG = "Invalid input, using default size {size}."
GENERATING_MSG = "Generating a {size} x {size} multiplication table..."
PRACTICE_PROMPT = "\nWould you like to practice? (y/n): "
QUIZ_PROMPT = " What is {a} x {b}? "
QUIZ_CORRECT_MSG = "Correct! ☻"
QUIZ_WRONG_MSG = "Oops! The correct answer is {product} :D"
QUIZ_INVALID_MSG = "Oops! Not a valid number..."
FAREWELL_MSG = "Thanks for using the Multiplication Table app! See you ;)"
