from heatplan.report import main

main()
