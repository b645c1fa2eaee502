"""Python counterparts of exercise solutions, grouped by topic."""