"""Energy estimation: BMR, TDEE, goal calories, macros and BMI."""
