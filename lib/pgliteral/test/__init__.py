##
# .test - unittest modules; see .test.testall
##
