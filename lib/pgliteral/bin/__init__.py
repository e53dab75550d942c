##
# .bin - command line tools
##
