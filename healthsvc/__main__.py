from healthsvc.healthcheck import main

main()
